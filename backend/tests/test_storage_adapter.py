import pytest
from botocore.stub import ANY, Stubber

from buildlog.shared.adapters.storage_adapter import UPLOAD_CACHE_CONTROL, StorageAdapter
from buildlog.shared.core.exceptions import ObjectExistsError, StorageError


@pytest.fixture
def adapter():
    return StorageAdapter(
        bucket="uploads",
        region="us-east-1",
        endpoint_url="https://storage.test",
        aws_access_key_id="test-key",
        aws_secret_access_key="test-secret",
        public_bucket=False,
    )


def test_upload_is_cached_and_never_overwrites(adapter):
    with Stubber(adapter.client) as stubber:
        stubber.add_response(
            "put_object",
            {},
            {
                "Bucket": "uploads",
                "Key": "u1/1_a.png",
                "Body": ANY,
                "ContentType": "image/png",
                "CacheControl": UPLOAD_CACHE_CONTROL,
                "IfNoneMatch": "*",
            },
        )

        assert adapter.upload_object("u1/1_a.png", b"data", "image/png") == "u1/1_a.png"
        stubber.assert_no_pending_responses()


def test_upload_conflict_raises_object_exists(adapter):
    with Stubber(adapter.client) as stubber:
        stubber.add_client_error("put_object", "PreconditionFailed", http_status_code=412)

        with pytest.raises(ObjectExistsError):
            adapter.upload_object("u1/1_a.png", b"data", "image/png")


def test_upload_failure_raises_storage_error(adapter):
    with Stubber(adapter.client) as stubber:
        stubber.add_client_error("put_object", "AccessDenied", http_status_code=403)

        with pytest.raises(StorageError):
            adapter.upload_object("u1/1_a.png", b"data", "image/png")


def test_remove_reports_failures_without_raising(adapter):
    with Stubber(adapter.client) as stubber:
        stubber.add_response(
            "delete_objects",
            {"Errors": [{"Key": "u1/2_b.png", "Code": "AccessDenied"}]},
        )
        stubber.add_client_error("delete_objects", "InternalError", http_status_code=500)

        assert adapter.remove_objects(["u1/1_a.png", "u1/2_b.png"]) == ["u1/2_b.png"]
        assert adapter.remove_objects(["u1/3_c.png"]) == ["u1/3_c.png"]


def test_remove_nothing_is_a_noop(adapter):
    assert adapter.remove_objects([]) == []


def test_public_url_is_path_style(adapter):
    assert adapter.public_url("u1/1_my shot.png") == (
        "https://storage.test/uploads/u1/1_my%20shot.png"
    )


def test_public_base_url_override():
    adapter = StorageAdapter(bucket="uploads", public_base_url="https://cdn.test/public/uploads/")

    assert adapter.public_url("u1/1_a.png") == "https://cdn.test/public/uploads/u1/1_a.png"


def test_display_url_signs_private_objects(adapter):
    url = adapter.display_url("u1/1_a.png")

    assert url.startswith("https://")
    assert "u1/1_a.png?" in url
    assert "Signature" in url or "X-Amz-Signature" in url


def test_display_url_is_public_for_public_buckets():
    adapter = StorageAdapter(
        bucket="uploads", endpoint_url="https://storage.test", public_bucket=True
    )

    assert adapter.display_url("u1/1_a.png") == "https://storage.test/uploads/u1/1_a.png"


def test_list_objects(adapter):
    with Stubber(adapter.client) as stubber:
        stubber.add_response(
            "list_objects_v2",
            {"Contents": [{"Key": "u1/1_a.png", "Size": 3}]},
            {"Bucket": "uploads", "Prefix": "u1/", "MaxKeys": 10},
        )

        assert adapter.list_objects("u1/") == [
            {"name": "u1/1_a.png", "size": 3, "last_modified": None}
        ]
