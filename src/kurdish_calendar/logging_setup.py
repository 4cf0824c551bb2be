import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# Third-party loggers forced to WARNING; jdatetime and hijridate do not log
NOISY_LOGGERS: tuple[str, ...] = ()


class TruncateLongMsgs(logging.Filter):
    """Truncates very long log messages (e.g. dumped holiday lists) to keep console readable."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except (TypeError, ValueError):
            # If formatting fails, let it pass unmodified.
            return True
        if self.max_len and len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    console_truncate_len: int = 200,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_level: Optional[int] = None,
    file_max_bytes: int = 5_000_000,
    file_backup_count: int = 3,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure root logging once. Call this from the application's entry point.

    - Library modules never call this; they just use `logging.getLogger(__name__)`.
    - Adds a console handler (with optional truncation) and an optional rotating file handler.
    - Silences noisy third-party loggers.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    # Handlers attached by the runtime (e.g. Jupyter) are replaced so this
    # configuration is authoritative.
    if root.handlers:
        for h in list(root.handlers):
            root.removeHandler(h)

    root.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        if console_truncate_len and console_truncate_len > 0:
            ch.addFilter(TruncateLongMsgs(console_truncate_len))
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level if file_level is not None else level)
        fh.setFormatter(formatter)
        # Files keep the full message.
        root.addHandler(fh)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("🚀 Logging initialised (level=%s)", logging.getLevelName(level))
