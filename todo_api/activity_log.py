# todo_api/activity_log.py
import logging, os
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def now_iso():
    # 2024-05-01T12:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ActivityLog:
    """Append-only text log of requests and mutations.

    Failures stay here: they are reported on the console and never raised
    to the caller.
    """

    def __init__(self, path):
        self.path = path

    def log(self, message):
        line = f"{now_iso()} - {message}\n"
        try:
            log_dir = os.path.dirname(self.path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            logger.error("Failed to log: %s", e)
            return
        logger.info("Logged: %s", line.strip())
