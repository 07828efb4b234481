"""
Adapters Package

External service integrations.

Contents:
=========
- storage_adapter: S3-compatible object storage (boto3)

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from buildlog.shared.adapters import StorageAdapter
"""

from buildlog.shared.adapters.storage_adapter import StorageAdapter, UPLOAD_CACHE_CONTROL

__all__ = ["StorageAdapter", "UPLOAD_CACHE_CONTROL"]
