import re
import time
import uuid


def _sanitize(part: str) -> str:
    return re.sub(r"[^a-z0-9]", "_", part.lower()).strip("_")


def split_extension(filename: str):
    # "archive.tar.gz" -> ("archive.tar", "gz"); ".env" has no extension
    base, dot, ext = filename.rpartition(".")
    if not dot or not base or not ext:
        return filename, ""
    return base, ext


def make_storage_name(original_filename: str, now=None) -> str:
    """
    Storage-safe, collision-resistant object name for an uploaded file.

    ``<epoch-ms>_<random>_<sanitized base>.<ext>``. Two uploads of the same
    name never share a storage name.
    """
    millis = int((time.time() if now is None else now) * 1000)
    unique = uuid.uuid4().hex[:8]
    # drop any client-side directory part
    filename = (original_filename or "").replace("\\", "/").rsplit("/", 1)[-1]
    base, ext = split_extension(filename)
    safe_base = _sanitize(base) or "file"
    safe_ext = _sanitize(ext)
    name = f"{millis}_{unique}_{safe_base}"
    return f"{name}.{safe_ext}" if safe_ext else name
