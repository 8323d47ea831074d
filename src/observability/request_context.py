import re
import time
import uuid
from flask import g, request

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_RE = re.compile(r"^[0-9a-f]{12}$")

def start_request():
    # reuse a well-formed id from a proxy so its logs line up with ours
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    g.request_id = incoming if _REQUEST_ID_RE.match(incoming) else uuid.uuid4().hex[:12]
    g.start_time = time.time()

def end_request(response):
    duration_ms = int((time.time() - g.start_time) * 1000)

    entry = {
        "request_id": g.request_id,
        "method": request.method,
        "path": request.path,
        "status": response.status_code,
        "duration_ms": duration_ms,
        "content_length": request.content_length,
    }
    if request.files:
        entry["files"] = [f.filename for f in request.files.getlist("file")]

    print(f"[REQUEST] {entry}")
    response.headers[REQUEST_ID_HEADER] = g.request_id
    return response
