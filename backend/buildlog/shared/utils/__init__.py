"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management
- text: Comma-list parsing and blank-to-null normalization for form fields
- timeslots: Morning/midday/evening classification
- storage_paths: Object keys and storage path resolution

Usage:
======
    from buildlog.shared.utils.security import SecurityUtils
    from buildlog.shared.utils.text import parse_comma_list
"""

from buildlog.shared.utils.security import SecurityUtils
from buildlog.shared.utils.text import (
    parse_comma_list,
    join_comma_list,
    normalize_optional_text,
)
from buildlog.shared.utils.storage_paths import (
    build_object_key,
    clipboard_filename,
    get_storage_path,
    sanitize_filename,
)

__all__ = [
    "SecurityUtils",
    "parse_comma_list",
    "join_comma_list",
    "normalize_optional_text",
    "build_object_key",
    "clipboard_filename",
    "get_storage_path",
    "sanitize_filename",
]
