"""
Logging setup with contextvars-based metadata injection.

- Adds run_tag and the running command into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_command = contextvars.ContextVar("command", default="-")

# Full run id kept for metadata (not printed every line)
cv_run_id_full = contextvars.ContextVar("run_id_full", default="-")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full run_id.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.cmd = cv_command.get() or "-"
        return True


def set_log_context(*, run_id_full: str | None = None, command: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if run_id_full is not None:
        cv_run_id_full.set(str(run_id_full))
        cv_run_tag.set(make_run_tag(str(run_id_full)))
    if command is not None:
        cv_command.set(str(command))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form (e.g. for report metadata)."""
    return {
        "run_tag": str(cv_run_tag.get() or "-"),
        "run_id_full": str(cv_run_id_full.get() or "-"),
        "command": str(cv_command.get() or "-"),
    }


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] r=%(run)s c=%(cmd)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s c=%(cmd)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
