import json
import logging
from datetime import datetime, timezone
from typing import Optional

from northwind.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, tagged with the app name and environment."""

    def __init__(self, app_name: str, app_env: str):
        super().__init__()
        self.app_name = app_name
        self.app_env = app_env

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "app": self.app_name,
            "env": self.app_env,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


class NorthwindHandler(logging.StreamHandler):
    """Marks the root handler installed by setup_logging()."""


def setup_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """
    Installs (or replaces) this app's handler on the root logger.

    Handlers installed by anyone else, uvicorn or pytest for instance, are left
    in place, so calling this again only swaps our own handler.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = NorthwindHandler()
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter(settings.APP_NAME, settings.APP_ENV))
    else:
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    for existing in [h for h in root.handlers if isinstance(h, NorthwindHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    return handler
