from flask import Blueprint, request, jsonify, current_app
from observability.debug_log import log_debug
from observability.metrics import inc
from services.storage import InvalidFilename, save_upload

upload_bp = Blueprint("upload", __name__)

FILE_FIELD = "file"

MISSING_FILE_MESSAGE = "请上传文一个件"
INVALID_NAME_MESSAGE = "非法文件名"


def _bad_request(message):
    inc("upload_rejected")
    return jsonify({"message": message, "code": 400}), 400


@upload_bp.route("/upload", methods=["POST"])
def upload_file():
    """
    Persist the single file under the "file" field to UPLOAD_DIR/<filename>.
    Same-name uploads overwrite. Filesystem errors propagate as a 500.
    """
    inc("upload_requests")
    f = request.files.get(FILE_FIELD)
    # browsers send an empty filename when nothing was picked
    if f is None or not f.filename:
        log_debug("Rejected: no file in request")
        return _bad_request(MISSING_FILE_MESSAGE)

    upload_dir = current_app.config["UPLOAD_DIR"]
    try:
        path, size = save_upload(f, upload_dir)
    except InvalidFilename as e:
        log_debug(f"Rejected unsafe filename: {e}")
        return _bad_request(INVALID_NAME_MESSAGE)
    except OSError as e:
        inc("upload_failures")
        log_debug(f"Save failed for {f.filename}: {e}")
        raise

    inc("upload_files_saved")
    inc("upload_bytes_total", size)
    log_debug(f"open {path} to see the uploaded file")

    return jsonify({"data": None, "message": "success", "code": 200})
