# todo_api/app.py
import json, logging, os, re
from flask import Flask, Blueprint, Response, current_app, request, jsonify
from werkzeug.exceptions import HTTPException
from .config import CFG
from .storage import TodoStore
from .activity_log import ActivityLog

logger = logging.getLogger(__name__)

bp = Blueprint("todos", __name__)

# ----------------- Helpers -----------------
def get_store():
    return current_app.extensions["todo_store"]

def get_activity_log():
    return current_app.extensions["activity_log"]

def text(body, status):
    return Response(body, status=status, mimetype="text/plain")

LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

def parse_id(raw):
    # leading integer wins ("1abc" is 1), anything else matches nothing
    m = LEADING_INT.match(raw)
    return int(m.group(1)) if m else None

def read_body():
    # malformed JSON is not handled here; it ends up as a 500.
    # arrays, scalars and null carry no todo fields
    data = json.loads(request.get_data(as_text=True))
    return data if isinstance(data, dict) else {}

def is_blank(value):
    # null, false, 0 and "" are blank; empty lists and objects are not
    return value in (None, False, 0, "")

def dump(todo):
    return json.dumps(todo, separators=(",", ":"), ensure_ascii=False)

def next_id(todos):
    return max(t["id"] for t in todos) + 1 if todos else 1

def find_index(todos, todo_id):
    if todo_id is None:
        return -1
    return next((i for i, t in enumerate(todos) if t.get("id") == todo_id), -1)

# ----------------- Request log -----------------
@bp.before_app_request
def log_request():
    get_activity_log().log(f"{request.method} {request.path}")

# ----------------- API: list/get/create/update/delete -----------------
def list_todos():
    return jsonify(get_store().load())

def get_todo(todo_id):
    todos = get_store().load()
    i = find_index(todos, parse_id(todo_id))
    if i == -1:
        return jsonify({"error": "Todo not found"}), 404
    return jsonify(todos[i])

def create_todo():
    store = get_store()
    todos = store.load()
    data = read_body()
    if is_blank(data.get("title")):
        return text("Missing title", 400)

    completed = data.get("completed")
    t = {
        "id": next_id(todos),
        "title": data["title"],
        "completed": False if completed is None else completed,
    }
    todos.append(t)
    store.save(todos)

    get_activity_log().log(f"POST Created: {dump(t)}")
    return jsonify(t), 201

def update_todo(todo_id):
    tid = parse_id(todo_id)
    store = get_store()
    todos = store.load()
    data = read_body()
    i = find_index(todos, tid)
    if i == -1:
        return text("Todo not found", 404)

    # shallow merge, the path id always wins
    todos[i] = {**todos[i], **data, "id": tid}
    store.save(todos)

    get_activity_log().log(f"PUT Updated: {dump(todos[i])}")
    return jsonify(todos[i])

def delete_todo(todo_id):
    tid = parse_id(todo_id)
    store = get_store()
    todos = store.load()
    i = find_index(todos, tid)
    if i == -1:
        return text("Todo not found", 404)

    t = todos.pop(i)
    store.save(todos)

    get_activity_log().log(f"DELETE Removed: {dump(t)}")
    return jsonify(t)

# ----------------- Routing -----------------
# (method, number of non-empty path segments) -> operation
ROUTES = {
    ("GET", 1): list_todos,
    ("POST", 1): create_todo,
    ("GET", 2): get_todo,
    ("PUT", 2): update_todo,
    ("DELETE", 2): delete_todo,
}

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# every path lands here so "/todosx" and "/todos//1" are split like any other
@bp.route("/", defaults={"path": ""}, methods=ALL_METHODS,
          provide_automatic_options=False, merge_slashes=False)
@bp.route("/<path:path>", methods=ALL_METHODS,
          provide_automatic_options=False, merge_slashes=False, strict_slashes=False)
def dispatch(path):
    if not request.path.startswith("/todos"):
        return text("Not Found", 404)
    parts = [p for p in request.path.split("/") if p]
    view = ROUTES.get((request.method, len(parts)))
    if view is None:
        return text("Not Found", 404)
    return view(*parts[1:])

# ----------------- Errors -----------------
def register_error_handlers(app):
    # unknown routes and unsupported methods look the same to clients
    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(e):
        return text("Not Found", 404)

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Error: %s", e)
        return text("Internal Server Error", 500)

# ----------------- App -----------------
def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(CFG)
    if overrides:
        app.config.update(overrides)
    # explicit file paths win, otherwise both live in DATA_DIR
    app.config["TODOS_FILE"] = app.config["TODOS_FILE"] or os.path.join(app.config["DATA_DIR"], "todos.json")
    app.config["LOG_FILE"] = app.config["LOG_FILE"] or os.path.join(app.config["DATA_DIR"], "logs.txt")
    # keep record fields in insertion order
    app.json.sort_keys = False

    app.extensions["todo_store"] = TodoStore(app.config["TODOS_FILE"])
    app.extensions["activity_log"] = ActivityLog(app.config["LOG_FILE"])

    app.register_blueprint(bp)
    register_error_handlers(app)
    return app


def main():
    logging.basicConfig(
        level=getattr(logging, str(CFG["LOG_LEVEL"]).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    app = create_app()
    logger.info("Server running on http://localhost:%s", app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=app.config["THREADED"])


# run only if executed directly
if __name__ == "__main__":
    main()
