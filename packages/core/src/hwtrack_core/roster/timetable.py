"""Study programs and academic groups scraped from the faculty timetable page."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_HEADERS = {"Accept-Language": "ru"}


def parse_programs_groups(html: str) -> dict[str, list[str]]:
    """Map each program listed on a timetable page to its group titles.

    A program listed more than once has its titles concatenated in page order.
    """
    soup = BeautifulSoup(html, "html.parser")
    programs_groups: dict[str, list[str]] = {}

    for program_node in soup.select("li[class*='common-list-item row']"):
        name_node = program_node.select_one("div[class*='col-sm-5']")
        title_nodes = program_node.select("div[class*='col-sm-1']")
        if name_node is None or not title_nodes:
            continue

        program_name = name_node.get_text().strip()
        titles = []
        for title_node in title_nodes:
            link = title_node.find("a")
            if link is not None and link.get("title") is not None:
                titles.append(link["title"])

        programs_groups.setdefault(program_name, []).extend(titles)

    return programs_groups


def fetch_programs_groups(url: str, timeout: float = 30.0, client: httpx.Client | None = None) -> dict[str, list[str]]:
    """Download and parse the timetable page.

    Never raises — a failed download or parse is logged and gives {}.
    """
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                response = own_client.get(url, headers=_HEADERS)
        else:
            response = client.get(url, headers=_HEADERS)
        response.raise_for_status()
        return parse_programs_groups(response.text)
    except Exception as e:
        logger.warning("Could not load study programs from %s (%s): %s", url, type(e).__name__, e)
        return {}
