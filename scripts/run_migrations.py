#!/usr/bin/env python3
"""Upgrade the postgres schema to the latest revision."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from qna.config import Settings
from qna.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    if settings.storage.backend != "postgres":
        logfire.warn(
            "Migrating while the memory backend is configured",
            storage_backend=settings.storage.backend,
        )

    config = Config(str(ALEMBIC_INI))
    config.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(config, revision)
        except Exception as e:
            logfire.error(
                "Migration failed",
                revision=revision,
                error=str(e),
                _exc_info=sys.exc_info(),
            )
            raise
    logfire.info("Schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
