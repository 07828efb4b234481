"""
Storage adapter - S3-compatible object storage operations.

Provides:
- Object upload (create-only, never overwrites)
- Best-effort bulk removal
- Public URL and time-limited signed URL resolution
- Prefix listing for diagnostics

Objects live in a single bucket (``uploads`` by default) under
``{user_id}/{timestamp_ms}_{name}``. Any S3-compatible service works; set
``STORAGE_ENDPOINT_URL`` for non-AWS providers.
"""

from typing import Any, Optional
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from buildlog.config.settings import settings
from buildlog.shared.core.exceptions import ObjectExistsError, StorageError
from buildlog.shared.core.logging import get_logger

logger = get_logger(__name__)


# Browsers may cache media for an hour; matches the signed URL lifetime
UPLOAD_CACHE_CONTROL = "max-age=3600"

# Error codes S3-compatible services return when If-None-Match: * fails
PRECONDITION_FAILED_CODES = frozenset({"PreconditionFailed", "412", "ConditionalRequestConflict"})


class StorageAdapter:
    """
    Adapter for S3-compatible object storage.

    Handles:
    - Writing uploaded media to the bucket
    - Removing objects (failures reported, never raised)
    - Resolving display URLs (public or signed)
    """

    def __init__(
        self,
        bucket: Optional[str] = None,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        public_bucket: Optional[bool] = None,
        public_base_url: Optional[str] = None,
    ):
        """
        Initialize storage adapter.

        Args:
            bucket: Bucket name (default STORAGE_BUCKET)
            region: AWS region
            endpoint_url: Custom S3 endpoint for compatible providers
            aws_access_key_id: AWS access key
            aws_secret_access_key: AWS secret key
            public_bucket: Serve public URLs instead of signed ones
            public_base_url: Base for public URLs (default path-style endpoint URL)
        """
        self.bucket = bucket or settings.STORAGE_BUCKET
        self.region = region or settings.AWS_REGION
        self.endpoint_url = endpoint_url or settings.STORAGE_ENDPOINT_URL or None
        self.aws_access_key_id = aws_access_key_id or settings.AWS_ACCESS_KEY_ID
        self.aws_secret_access_key = aws_secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        self.public_bucket = (
            settings.STORAGE_PUBLIC_BUCKET if public_bucket is None else public_bucket
        )
        self.public_base_url = public_base_url or settings.STORAGE_PUBLIC_BASE_URL
        self._client = None

    @property
    def client(self):
        """Lazy-loaded S3 client."""
        if self._client is None:
            options: dict[str, Any] = {"region_name": self.region}
            if self.endpoint_url:
                options["endpoint_url"] = self.endpoint_url
            if self.aws_access_key_id and self.aws_secret_access_key:
                options["aws_access_key_id"] = self.aws_access_key_id
                options["aws_secret_access_key"] = self.aws_secret_access_key

            # Without explicit keys boto3 falls back to IAM role / environment
            self._client = boto3.client("s3", **options)
        return self._client

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE
    # ═══════════════════════════════════════════════════════════════════════════

    def upload_object(self, path: str, data: bytes, content_type: str) -> str:
        """
        Upload a blob to ``path``.

        The write is conditional (``If-None-Match: *``) so an existing
        object is never overwritten.

        Args:
            path: Bucket-relative object key
            data: File contents
            content_type: MIME type stored with the object

        Returns:
            The object key that was written

        Raises:
            ObjectExistsError: If an object already exists at ``path``
            StorageError: If the storage service rejects the upload
        """
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
                CacheControl=UPLOAD_CACHE_CONTROL,
                IfNoneMatch="*",
            )
            logger.info("Uploaded object", path=path, size=len(data), content_type=content_type)
            return path

        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in PRECONDITION_FAILED_CODES:
                logger.warning("Object already exists", path=path)
                raise ObjectExistsError(
                    f"Object already exists: {path}", details={"path": path}
                ) from e
            logger.error("Failed to upload object", path=path, error=str(e))
            raise StorageError(f"Failed to upload {path}: {e}", details={"path": path}) from e

        except BotoCoreError as e:
            logger.error("Failed to upload object", path=path, error=str(e))
            raise StorageError(f"Failed to upload {path}: {e}", details={"path": path}) from e

    def remove_objects(self, paths: list[str]) -> list[str]:
        """
        Remove objects, best-effort.

        Failures are logged at warning level and reported back, never
        raised, so metadata cleanup can always proceed.

        Args:
            paths: Bucket-relative object keys

        Returns:
            Paths that could not be removed
        """
        if not paths:
            return []

        try:
            response = self.client.delete_objects(
                Bucket=self.bucket,
                Delete={"Objects": [{"Key": path} for path in paths], "Quiet": True},
            )
        except (ClientError, BotoCoreError) as e:
            logger.warning("Failed to remove objects", paths=paths, error=str(e))
            return list(paths)

        failed = [error["Key"] for error in response.get("Errors", [])]
        if failed:
            logger.warning("Some objects were not removed", paths=failed)
        else:
            logger.info("Removed objects", count=len(paths))
        return failed

    # ═══════════════════════════════════════════════════════════════════════════
    # URLS
    # ═══════════════════════════════════════════════════════════════════════════

    def public_url(self, path: str) -> str:
        """
        Build the public URL of an object.

        Always path-style (``.../{bucket}/{key}``) so ``get_storage_path`` can
        map it back to the key.
        """
        if self.public_base_url:
            base = self.public_base_url.rstrip("/")
        elif self.endpoint_url:
            base = f"{self.endpoint_url.rstrip('/')}/{self.bucket}"
        else:
            base = f"https://s3.{self.region}.amazonaws.com/{self.bucket}"
        return f"{base}/{quote(path)}"

    def create_signed_url(self, path: str, expires_in: Optional[int] = None) -> str:
        """
        Mint a time-limited GET URL for a private object.

        Args:
            path: Bucket-relative object key
            expires_in: Lifetime in seconds (default SIGNED_URL_EXPIRES_SECONDS)

        Raises:
            StorageError: If signing fails
        """
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": path},
                ExpiresIn=expires_in or settings.SIGNED_URL_EXPIRES_SECONDS,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to sign URL", path=path, error=str(e))
            raise StorageError(f"Failed to sign URL for {path}: {e}", details={"path": path}) from e

    def display_url(self, path: str) -> str:
        """Resolve the URL a client should render, based on bucket visibility."""
        if self.public_bucket:
            return self.public_url(path)
        return self.create_signed_url(path)

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTING
    # ═══════════════════════════════════════════════════════════════════════════

    def list_objects(self, prefix: str, limit: int = 10) -> list[dict[str, Any]]:
        """
        List objects under a prefix.

        Returns:
            Dicts with ``name``, ``size`` and ``last_modified`` (ISO string)

        Raises:
            StorageError: If the listing fails
        """
        try:
            response = self.client.list_objects_v2(
                Bucket=self.bucket,
                Prefix=prefix,
                MaxKeys=limit,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list objects", prefix=prefix, error=str(e))
            raise StorageError(f"Failed to list {prefix}: {e}", details={"prefix": prefix}) from e

        return [
            {
                "name": item["Key"],
                "size": item.get("Size", 0),
                "last_modified": (
                    item["LastModified"].isoformat() if item.get("LastModified") else None
                ),
            }
            for item in response.get("Contents", [])
        ]
