"""Schema Migrations — programmatic Alembic upgrade to head.

Invariants:
    - Revisions live in newsletter/alembic/versions and are applied in order, append-only
    - Scripts ship as package data: works from an installed wheel, no checkout needed
    - Upgrading an up-to-date database is a no-op

Design Decisions:
    - URL passed through config.attributes, not set_main_option: avoids
      ConfigParser interpolation of '%' in escaped passwords
    - configure_logger=False: alembic's fileConfig must not replace app logging
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parents[1] / "alembic"


def build_alembic_config(database_url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    config.attributes["database_url"] = database_url
    config.attributes["configure_logger"] = False
    return config


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database at database_url to the given revision.

    Blocking: alembic's env.py drives its own event loop, so call this from a
    worker thread when an event loop is already running.
    """
    logger.info(f"Applying migrations up to {revision}")
    command.upgrade(build_alembic_config(database_url), revision)
