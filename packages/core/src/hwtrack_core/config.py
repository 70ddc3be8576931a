import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "roster": "static",  # "static" reads roster_file; "university" scrapes the timetable and queries LDAP
    "roster_file": "roster.yml",
    "timetable_url": "https://timetable.spbu.ru/MATH?lang=ru",
    "ldap_host": "ad.pu.ru",
    "ldap_port": 389,
    "ldap_search_base": "DC=ad,DC=pu,DC=ru",
    "student_email_domain": "student.spbu.ru",
    "request_timeout": 30,  # seconds, for GitHub, timetable and LDAP requests
}


def load_config(config_path: str = ".hwtrack.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .hwtrack.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # Credentials never live in the config file.
    config["github_token"] = os.environ.get("GITHUB_TOKEN")
    config["ldap_username"] = os.environ.get("LDAP_USERNAME")
    config["ldap_password"] = os.environ.get("LDAP_PASSWORD")

    return config
