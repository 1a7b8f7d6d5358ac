"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tag and command
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "make_run_tag",
]
