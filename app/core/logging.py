# app/core/logging.py
import json
import logging
import sys

from app.core.config import settings


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_obj = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        # extra={"props": {...}} gets merged into the line
        if hasattr(record, "props"):
            log_obj.update(record.props)

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def setup_logging(level: str | None = None, json_lines: bool | None = None) -> None:
    """
    Configure the root logger once per process.
    Calling it again replaces the handler instead of stacking a new one.
    """
    level = level or settings.log_level
    json_lines = settings.log_json if json_lines is None else json_lines

    handler = logging.StreamHandler(sys.stdout)
    if json_lines:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_event_status_handler", False):
            root.removeHandler(existing)

    handler._event_status_handler = True
    root.addHandler(handler)
    root.setLevel(level.upper())
