from flask import Flask, send_from_directory
import os
from config import load_config
from observability.request_context import start_request, end_request
from routes.ops import ops_bp
from routes.upload import upload_bp

def create_app(config=None):
    cfg = load_config(config)
    # FRONTEND_DIR defaults to project_root/frontend next to src/
    app = Flask(__name__, static_folder=cfg["FRONTEND_DIR"], static_url_path="/")

    app.config.update(cfg)
    # fixed for the life of the process; every upload lands here
    os.makedirs(app.config["UPLOAD_DIR"], exist_ok=True)

    app.register_blueprint(ops_bp, url_prefix="/api")
    app.register_blueprint(upload_bp, url_prefix="/api")

    @app.route("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.before_request
    def _before():
        start_request()

    @app.after_request
    def _after(response):
        return end_request(response)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host=os.environ.get("HOST", "0.0.0.0"), port=int(os.environ.get("PORT", 8080)))
