"""Observability – structured logging helpers."""
from wf_directory.observability.logging.factory import configure_logging
from wf_directory.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
