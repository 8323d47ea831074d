import os

FRONTEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "frontend"))

# uploads and the debug log share one root, resolved against the CWD
DEFAULT_STORAGE_DIR = "storage"


def load_config(overrides=None):
    """
    Build the app config from the environment.
    Explicit overrides win over env vars. UPLOAD_DIR and DEBUG_LOG_DIR default
    to <STORAGE_DIR>/uploads and <STORAGE_DIR>; all paths are made absolute.
    """
    storage_dir = os.environ.get("STORAGE_DIR", DEFAULT_STORAGE_DIR)
    if overrides and "STORAGE_DIR" in overrides:
        storage_dir = overrides["STORAGE_DIR"]

    cfg = {
        "STORAGE_DIR": storage_dir,
        "UPLOAD_DIR": os.environ.get("UPLOAD_DIR", os.path.join(str(storage_dir), "uploads")),
        "DEBUG_LOG_DIR": os.environ.get("DEBUG_LOG_DIR", str(storage_dir)),
        "FRONTEND_DIR": os.environ.get("FRONTEND_DIR", FRONTEND_DIR),
    }
    if overrides:
        cfg.update(overrides)

    for key in ("STORAGE_DIR", "UPLOAD_DIR", "DEBUG_LOG_DIR", "FRONTEND_DIR"):
        cfg[key] = os.path.abspath(str(cfg[key]))
    return cfg
