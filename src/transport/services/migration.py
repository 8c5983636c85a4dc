"""Run Alembic migrations programmatically for the migrate Lambda."""

import io
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from transport.config import get_config

logger = logging.getLogger(__name__)


def run_migrations(revision: str = "head") -> dict[str, str]:
    config = get_config()

    ini_path = Path(config.alembic_ini_path)
    cfg = Config(str(ini_path))
    cfg.set_main_option("script_location", str(ini_path.parent / "alembic"))
    cfg.set_main_option("sqlalchemy.url", config.database_url.replace("%", "%%"))

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, revision)
        output = stderr_buf.getvalue()
        logger.info("Migration complete: %s", output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
