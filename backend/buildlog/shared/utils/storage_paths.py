"""
Storage object keys.

Objects live in the uploads bucket under ``{user_id}/{timestamp_ms}_{name}``.
The database only ever stores that bucket-relative path; older rows may
still hold a full public URL, which ``get_storage_path`` maps back.
"""

import re
import time
from typing import Optional
from urllib.parse import unquote, urlparse


_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def sanitize_filename(file_name: str) -> str:
    """Replace every character outside [A-Za-z0-9.-] with an underscore."""
    return _UNSAFE_NAME_CHARS.sub("_", file_name)


def current_timestamp_ms() -> int:
    return int(time.time() * 1000)


def build_object_key(user_id: str, file_name: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Build the object key for a new upload.

    Example:
        build_object_key("u1", "my shot (1).png", 1700000000000)
        # "u1/1700000000000_my_shot__1_.png"
    """
    stamp = timestamp_ms if timestamp_ms is not None else current_timestamp_ms()
    return f"{user_id}/{stamp}_{sanitize_filename(file_name)}"


def clipboard_filename(content_type: str, timestamp_ms: Optional[int] = None) -> str:
    """Name a pasted image: ``clipboard_{timestamp}.{ext}`` (ext from the MIME subtype)."""
    stamp = timestamp_ms if timestamp_ms is not None else current_timestamp_ms()
    extension = content_type.split("/", 1)[1] if "/" in content_type else ""
    return f"clipboard_{stamp}.{extension or 'png'}"


def get_storage_path(file_url: str, bucket: str = "uploads") -> str:
    """
    Resolve a stored ``file_url`` to its bucket-relative path.

    Relative paths are returned untouched. For absolute URLs the
    URL-decoded part after ``/{bucket}/`` is returned; a URL without that
    segment is returned unchanged.
    """
    if not file_url.startswith("http"):
        return file_url

    path = urlparse(file_url).path
    marker = f"/{bucket}/"
    if marker in path:
        return unquote(path.split(marker, 1)[1])
    return file_url


def belongs_to_user(storage_path: str, user_id: str) -> bool:
    """True if the object sits under the user's prefix."""
    return storage_path.startswith(f"{user_id}/")
