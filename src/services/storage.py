import os


class StorageError(Exception):
    """Base class for upload storage errors."""


class InvalidFilename(StorageError):
    """Client-supplied name is not a single plain path component."""


def validate_filename(filename: str) -> str:
    """
    Client filenames are used verbatim as the target name, so anything that
    could leave the base directory is refused instead of being rewritten.
    """
    if not filename:
        raise InvalidFilename("empty filename")
    if filename in (".", ".."):
        raise InvalidFilename(f"reserved filename: {filename!r}")
    if "/" in filename or "\\" in filename or "\x00" in filename:
        raise InvalidFilename(f"filename contains a path separator: {filename!r}")
    return filename


def target_path(base_dir: str, filename: str) -> str:
    name = validate_filename(filename)
    path = os.path.join(base_dir, name)
    # catches drive-relative names such as "C:evil" on Windows
    if os.path.dirname(os.path.abspath(path)) != os.path.abspath(base_dir):
        raise InvalidFilename(f"filename escapes upload directory: {filename!r}")
    return path


def save_upload(file_storage, base_dir: str) -> tuple[str, int]:
    """
    Stream an uploaded part to <base_dir>/<filename>, overwriting any
    existing file. Returns (path, bytes written).
    OSError from the filesystem is left to the caller.
    """
    path = target_path(base_dir, file_storage.filename)
    # FileStorage.save copies in chunks from the spooled part
    file_storage.save(path)
    return path, os.path.getsize(path)
