from flask import Blueprint, jsonify, current_app
from observability.metrics import snapshot

ops_bp = Blueprint("ops", __name__)

@ops_bp.route("/health", methods=["GET"])
def health():
    # the upload page names this directory in its success message
    return jsonify({"status": "ok", "upload_dir": current_app.config["UPLOAD_DIR"]})

@ops_bp.route("/metrics", methods=["GET"])
def metrics():
    return jsonify(snapshot())
