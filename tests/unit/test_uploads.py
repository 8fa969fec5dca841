from pathlib import Path
from unittest.mock import Mock

import pytest

from src.adapters.fs.filestore import FileSystemStore
from src.adapters.s3_storage import S3Store
from src.components.uploads import UploadRules, UploadService, object_key, validate_upload

RULES = UploadRules(
    max_upload_bytes=1024,
    allowed_mime_types=("image/png", "image/jpeg"),
    allowed_folders=("logos", "gallery"),
)


class TestValidateUpload:
    def test_valid(self) -> None:
        assert validate_upload(RULES, "logos", "image/png", 10) == []

    def test_folder_required(self) -> None:
        errors = validate_upload(RULES, None, "image/png", 10)
        assert [e.message for e in errors] == ["Folder is required"]

    def test_unknown_folder(self) -> None:
        errors = validate_upload(RULES, "secrets", "image/png", 10)
        assert errors[0].code == "folder_invalid"

    def test_empty_file(self) -> None:
        errors = validate_upload(RULES, "logos", "image/png", 0)
        assert errors[0].message == "Failed to fetch image"

    def test_too_large(self) -> None:
        errors = validate_upload(RULES, "logos", "image/png", 2048)
        assert errors[0].code == "file_too_large"

    def test_mime_not_allowed(self) -> None:
        errors = validate_upload(RULES, "logos", "application/pdf", 10)
        assert errors[0].code == "file_type_not_allowed"


def test_object_key_extension_follows_content_type() -> None:
    key = object_key("logos", "image/png")
    assert key.startswith("logos/")
    assert key.endswith(".png")
    assert object_key("logos", "image/jpeg").endswith(".jpg")


class TestFileSystemStore:
    def test_save_get_delete(self, tmp_path: Path) -> None:
        store = FileSystemStore(str(tmp_path))
        url = store.save("gallery/a.png", b"data", "image/png")

        assert url == "/uploads/gallery/a.png"
        assert store.get("gallery/a.png") == b"data"

        store.delete("gallery/a.png")
        with pytest.raises(FileNotFoundError):
            store.get("gallery/a.png")

    def test_rejects_traversal(self, tmp_path: Path) -> None:
        store = FileSystemStore(str(tmp_path / "uploads"))
        with pytest.raises(ValueError):
            store.save("../escape.png", b"x", "image/png")


class TestS3Store:
    def test_put_object_and_url(self) -> None:
        client = Mock()
        store = S3Store(bucket="chamber", region="ap-south-1", client=client)
        url = store.save("logos/a.png", b"data", "image/png")

        client.put_object.assert_called_once()
        kwargs = client.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "chamber"
        assert kwargs["Key"] == "logos/a.png"
        assert kwargs["ContentType"] == "image/png"
        assert url.endswith("/logos/a.png")

    def test_public_base_url(self) -> None:
        store = S3Store(bucket="chamber", public_base_url="https://cdn.example/", client=Mock())
        assert store.save("logos/a.png", b"x", "image/png") == "https://cdn.example/logos/a.png"


class TestUploadService:
    def test_upload_returns_url(self, tmp_path: Path) -> None:
        service = UploadService(store=FileSystemStore(str(tmp_path)), rules=RULES)
        url, errors = service.upload("logos", "logo.png", "image/png", b"png-bytes")

        assert errors == []
        assert url.startswith("/uploads/logos/")
        assert (tmp_path / url.removeprefix("/uploads/")).read_bytes() == b"png-bytes"

    def test_client_filename_does_not_pick_extension(self, tmp_path: Path) -> None:
        service = UploadService(store=FileSystemStore(str(tmp_path)), rules=RULES)
        url, errors = service.upload("logos", "x.html", "image/png", b"<script></script>")

        assert errors == []
        assert url.endswith(".png")
        assert list((tmp_path / "logos").glob("*.html")) == []

    def test_invalid_upload_not_stored(self) -> None:
        store = Mock()
        service = UploadService(store=store, rules=RULES)
        url, errors = service.upload(None, "logo.png", "image/png", b"x")

        assert url is None
        assert errors[0].code == "folder_required"
        store.save.assert_not_called()

    def test_exposes_size_limit(self) -> None:
        assert UploadService(store=Mock(), rules=RULES).max_upload_bytes == 1024
