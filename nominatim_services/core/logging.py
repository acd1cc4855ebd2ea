"""
Structured logging for geocoding services

Records carry a ``context`` mapping (geocoder, provider URL, service kind)
that both formatters render: the JSON formatter as top-level keys, the text
formatter as trailing ``key=value`` pairs.
"""

import datetime
import json
import logging
import sys
from collections.abc import Mapping
from typing import Any, Optional, Union

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    return dict(getattr(record, "context", None) or {})


class JsonFormatter(logging.Formatter):
    """One JSON object per line"""

    def __init__(self, service_name: Optional[str] = None):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.datetime.fromtimestamp(
                record.created, tz=datetime.timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.service_name:
            entry["service"] = self.service_name

        entry.update(_record_context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain text lines with the geocoding context appended"""

    def __init__(self, service_name: Optional[str] = None):
        fmt = TEXT_FORMAT
        if service_name:
            fmt = fmt.replace("%(name)s", f"{service_name}.%(name)s")
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if context:
            line += " " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


class GeocodingLoggerAdapter(logging.LoggerAdapter):
    """
    Attaches a fixed geocoding context to every record

    Context passed per call through ``extra={"context": {...}}`` is layered
    on top of the bound one.
    """

    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra["context"] = {**self.extra, **extra.get("context", {})}
        return msg, kwargs

    def bind(self, **context: Any) -> "GeocodingLoggerAdapter":
        """A new adapter with additional context fields"""
        return GeocodingLoggerAdapter(self.logger, {**self.extra, **context})


def configure_logging(
    level: str = "INFO", format_type: str = "json", service_name: Optional[str] = None
) -> None:
    """
    Install a stdout handler on the root logger

    Args:
        level: Log level name, case insensitive
        format_type: "json" or "text"
        service_name: Application name added to every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter_class = JsonFormatter if format_type == "json" else TextFormatter

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter_class(service_name))
    handler.setLevel(log_level)

    root.setLevel(log_level)
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(
    name: str, context: Optional[Mapping[str, Any]] = None
) -> Union[logging.Logger, GeocodingLoggerAdapter]:
    """
    Get a module logger, bound to a geocoding context when one is given

    Args:
        name: Logger name
        context: Fields added to every record, e.g. geocoder and provider_url

    Returns:
        Plain logger, or GeocodingLoggerAdapter when context is given
    """
    logger = logging.getLogger(name)

    if context:
        return GeocodingLoggerAdapter(logger, dict(context))

    return logger
