import datetime
import os

from flask import current_app, g, has_app_context

LOG_FILENAME = "error_debug.log"


def log_debug(msg, request_id=None):
    """
    Append a timestamped line to <DEBUG_LOG_DIR>/error_debug.log and echo it
    to stdout next to the [REQUEST] lines. Losing a debug line never fails
    the request.
    """
    rid = request_id or (getattr(g, "request_id", None) if has_app_context() else None) or "unknown"
    line = f"{datetime.datetime.now(datetime.timezone.utc).isoformat()} [{rid}] {msg}"
    print(f"[DEBUG] {line}")

    log_dir = current_app.config["DEBUG_LOG_DIR"] if has_app_context() else "storage"
    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(os.path.join(log_dir, LOG_FILENAME), "a", encoding="utf-8") as fh:
            fh.write(line + "\n")
    except OSError:
        pass
