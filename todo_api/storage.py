# todo_api/storage.py
import json, os
from threading import Lock


class TodoStore:
    """Whole-file JSON persistence for the todo collection.

    Every call goes to disk; nothing is cached between requests. The lock
    only serializes single load/save calls, a load-mutate-save cycle is not
    atomic (last writer wins).
    """

    def __init__(self, path):
        self.path = path
        self._lock = Lock()

    def load(self):
        with self._lock:
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except (OSError, ValueError):
                # missing, unreadable or corrupt file counts as empty
                return []

    def save(self, todos):
        data_dir = os.path.dirname(self.path)
        if data_dir:
            os.makedirs(data_dir, exist_ok=True)
        tmp = self.path + ".tmp"
        with self._lock:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(todos, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
