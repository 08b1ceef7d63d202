"""Run the default migrations: ``python -m rentlib.migrations``."""

import logging
import os
import sys

import psycopg2

from .runner import MigrationError, connect, run_migrations

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=os.getenv("RENTLIB_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    conn = None
    try:
        conn = connect()
        run_migrations(conn)
    except psycopg2.Error:
        logger.exception("Database error while running migrations")
        return 1
    except MigrationError:
        logger.exception("Database migrations aborted")
        return 1
    finally:
        if conn is not None:
            conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
