from __future__ import annotations

import json
import logging
import sys
from typing import Any

import structlog


def _rename_event_to_message(_: logging.Logger, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _serialize_json(_: logging.Logger, __: str, event_dict: dict[str, Any]) -> str:
    return json.dumps(event_dict, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            _rename_event_to_message,
            structlog.processors.format_exc_info,
            _serialize_json,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
