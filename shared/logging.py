"""
Shared logging configuration for Token Guard.
"""

import sys
import structlog
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional
from contextvars import ContextVar

# Context variables for the token being processed
subject_var: ContextVar[Optional[str]] = ContextVar('subject', default=None)
token_id_var: ContextVar[Optional[str]] = ContextVar('token_id', default=None)


def configure_logging(service_name: str, log_level: str = "info") -> None:
    """Configure structured logging for a service."""

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            add_correlation_context,
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
    logging.getLogger(service_name).setLevel(getattr(logging, log_level.upper()))


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add service context to log events."""
    # Logger names are "<service>.<component>"
    logger_name = event_dict.get("logger", "")
    if "." in logger_name:
        event_dict["service"] = logger_name.split(".")[0]

    return event_dict


def add_correlation_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the current token's subject and id to log events."""
    subject = subject_var.get()
    if subject:
        event_dict["subject"] = subject

    token_id = token_id_var.get()
    if token_id:
        event_dict["token_id"] = token_id

    return event_dict


def add_timestamp(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add high-precision timestamp to log events."""
    event_dict["timestamp"] = time.time()
    return event_dict


@contextmanager
def token_context(subject: Any = None, token_id: Any = None) -> Iterator[None]:
    """Tag log events emitted inside the block with a token's sub and jti.

    The previous values are restored on exit.
    """
    subject_reset = subject_var.set(str(subject) if subject is not None else None)
    token_id_reset = token_id_var.set(str(token_id) if token_id is not None else None)
    try:
        yield
    finally:
        token_id_var.reset(token_id_reset)
        subject_var.reset(subject_reset)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
