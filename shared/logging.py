"""
Shared logging configuration for TasbihKit.
"""

import sys
import structlog
import logging
import time
from typing import Any, Dict, Optional
from contextvars import ContextVar

# Category currently being loaded, attached to every event emitted inside a load
category_var: ContextVar[Optional[str]] = ContextVar('category', default=None)


def configure_logging(service_name: str = "tasbihkit", log_level: str = "info") -> None:
    """Configure structured logging for the library and its host application."""

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            add_category_context,
            add_timestamp,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )
    structlog.contextvars.bind_contextvars(service=service_name)


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the top-level component name to log events."""
    logger_name = event_dict.get("logger", "")
    if "." in logger_name:
        event_dict["component"] = logger_name.split(".")[0]

    return event_dict


def add_category_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the category being loaded, if any."""
    category = category_var.get()
    if category and "category" not in event_dict:
        event_dict["category"] = category

    return event_dict


def add_timestamp(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add high-precision timestamp to log events."""
    event_dict["timestamp"] = time.time()
    return event_dict


def set_category_context(category: Optional[str]) -> None:
    """Set the category in logging context."""
    category_var.set(category)


def clear_context():
    """Clear all context variables."""
    category_var.set(None)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
