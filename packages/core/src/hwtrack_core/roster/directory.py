"""Student lookup in the university LDAP directory.

Students are members of an ``АкадемГруппа_<group>`` directory group. Their
``cn`` is the student account name (the e-mail local part) and
``displayName`` holds "Name Surname Middle".
"""

from __future__ import annotations

import logging

from ldap3 import SUBTREE, Connection, Server
from ldap3.core.exceptions import LDAPException
from ldap3.utils.conv import escape_filter_chars

from hwtrack_core.roster.models import Student

logger = logging.getLogger(__name__)

_ATTRIBUTES = ["cn", "displayName"]


def build_group_filter(group: str, search_base: str) -> str:
    return (
        "(&(objectClass=person)"
        f"(memberOf=CN=АкадемГруппа_{escape_filter_chars(group)},OU=АкадемГруппа,OU=Группы,{search_base}))"
    )


class StudentDirectory:
    def __init__(
        self,
        host: str,
        port: int,
        search_base: str,
        username: str | None,
        password: str | None,
        email_domain: str,
        timeout: int = 30,
    ):
        self._server = Server(host, port=port, connect_timeout=timeout)
        self._search_base = search_base
        self._username = username
        self._password = password
        self._email_domain = email_domain
        self._timeout = timeout

    def _connect(self) -> Connection:
        return Connection(
            self._server,
            user=self._username,
            password=self._password,
            auto_bind=True,
            receive_timeout=self._timeout,
        )

    def find_students(self, group: str) -> list[Student]:
        """Return the students of a group.

        Never raises — directory errors are logged and the students collected
        so far are returned.
        """
        students: list[Student] = []
        connection = None
        try:
            connection = self._connect()
            connection.search(
                self._search_base,
                build_group_filter(group, self._search_base),
                search_scope=SUBTREE,
                attributes=_ATTRIBUTES,
            )
            for entry in connection.response or []:
                if entry.get("type") != "searchResEntry":
                    # Referrals are expected in a multi-domain forest.
                    continue
                student = self._to_student(entry.get("attributes") or {})
                if student is not None:
                    students.append(student)
        except LDAPException as e:
            logger.warning("LDAP lookup for group %s failed (%s): %s", group, type(e).__name__, e)
        finally:
            if connection is not None and connection.bound:
                try:
                    connection.unbind()
                except LDAPException as e:
                    logger.warning("LDAP unbind failed: %s", e)
        return students

    def _to_student(self, attributes: dict) -> Student | None:
        cn = _single(attributes.get("cn"))
        display_name = _single(attributes.get("displayName"))
        if not cn or not display_name:
            return None
        return Student.from_display_name(display_name, email=f"{cn}@{self._email_domain}")


def _single(value) -> str | None:
    """ldap3 returns multi-valued attributes as lists; take the first value."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value
