"""Command line entry point: ``readsync --addr 127.0.0.1:9200 --db koreader-sync.sqlite``."""
import logging

import click
import uvicorn

from readsync import __version__
from readsync.core.config import get_settings
from readsync.core.logs import setup_logging

logger = logging.getLogger(__name__)


def parse_addr(value: str) -> tuple[str, int]:
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        raise click.BadParameter(f"expected HOST:PORT, got {value!r}")
    return host or "0.0.0.0", int(port)


@click.command()
@click.version_option(version=__version__, prog_name="readsync")
@click.option("--addr", default=None, help="Listen address as HOST:PORT.")
@click.option("--db", "db_path", default=None, type=click.Path(dir_okay=False), help="SQLite database file.")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, ...).")
def main(addr, db_path, log_level):
    """Run the reading progress sync server."""
    from readsync.main import create_app

    settings = get_settings()
    if addr:
        settings.host, settings.port = parse_addr(addr)
    if db_path:
        settings.database_url = f"sqlite+aiosqlite:///{db_path}"
    if log_level:
        settings.log_level = log_level

    setup_logging(settings.log_level)
    logger.info("listen and serve at %s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, access_log=False, log_config=None)


if __name__ == "__main__":
    main()
