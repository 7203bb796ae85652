import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from persian_calendar.settings import Settings

LOG_FORMAT = "%(asctime)s  %(levelname)-7s  %(name)s: %(message)s"
LOG_FILE_MAX_BYTES = 512_000
LOG_FILE_BACKUPS = 2


class TruncateLongMsgs(logging.Filter):
    """Cuts console messages down to ``max_len`` characters."""

    def __init__(self, max_len: int):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False


def setup_logging(settings: Settings, *, level: Optional[int] = None, console: bool = True) -> None:
    """
    Route ``persian_calendar`` log records according to ``settings``.

    Called once by the CLI; library code only uses ``logging.getLogger(__name__)``.
    ``level`` overrides ``settings.log_level``. Console lines are cut to
    ``settings.log_truncate`` characters (0 disables the cut); the log file,
    when ``settings.log_file`` is set, keeps full messages.
    """
    global _configured
    if _configured:
        return

    level = settings.log_level if level is None else level
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    handlers = []
    if console:
        ch = logging.StreamHandler()
        if settings.log_truncate > 0:
            ch.addFilter(TruncateLongMsgs(settings.log_truncate))
        handlers.append(ch)
    if settings.log_file:
        handlers.append(
            RotatingFileHandler(settings.log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
        )

    for h in handlers:
        h.setFormatter(formatter)
        root.addHandler(h)

    _configured = True
    logging.getLogger(__name__).debug("🚀 logging ready: level=%s file=%s", logging.getLevelName(level), settings.log_file)
