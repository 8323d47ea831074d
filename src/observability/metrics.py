import threading

METRICS = {
    "upload_requests": 0,
    "upload_files_saved": 0,
    "upload_bytes_total": 0,
    "upload_rejected": 0,
    "upload_failures": 0,
}

# the threaded dev server runs handlers concurrently
_lock = threading.Lock()

def inc(key, value=1):
    with _lock:
        METRICS[key] = METRICS.get(key, 0) + value

def snapshot():
    with _lock:
        return dict(METRICS)

def reset():
    with _lock:
        for key in METRICS:
            METRICS[key] = 0
