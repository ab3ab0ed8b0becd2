# todo_api/config.py
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# If running on Vercel, use /tmp for writable storage (ephemeral).
DEFAULT_DATA_DIR = os.environ.get("DATA_DIR") or ("/tmp/todo-api" if os.environ.get("VERCEL") else os.path.join(BASE_DIR, "data"))

CFG = {
    "DATA_DIR": DEFAULT_DATA_DIR,
    # the whole collection lives in one JSON array; defaults to DATA_DIR/todos.json
    "TODOS_FILE": os.environ.get("TODOS_FILE"),
    # append-only activity log; defaults to DATA_DIR/logs.txt
    "LOG_FILE": os.environ.get("LOG_FILE"),
    "HOST": os.environ.get("HOST", "0.0.0.0"),
    "PORT": int(os.environ.get("PORT", "3002")),
    # single-threaded request handling unless explicitly enabled
    "THREADED": os.environ.get("THREADED", "").lower() in ("1", "true", "yes"),
    "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO"),
}
