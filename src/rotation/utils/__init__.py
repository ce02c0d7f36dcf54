"""Utilities package for the rotation scheduler."""
from .logging_setup import (
    TRACE,
    SchedulerLogger,
    get_logger,
    log_constraint,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_constraint",
    "SchedulerLogger",
    "TRACE",
]
