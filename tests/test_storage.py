"""
Tests for the Cloudinary storage client.
"""
import pytest
from unittest.mock import patch
from cloudinary.exceptions import Error as CloudinaryError

from admin_portal.config import Settings
from admin_portal.services.exceptions import StorageError
from admin_portal.services.storage import ImageStorage


def configured_storage():
    return ImageStorage(
        Settings(
            cloudinary_cloud_name="demo",
            cloudinary_api_key="key",
            cloudinary_api_secret="secret",
        )
    )


class TestImageStorage:
    """Test upload/destroy calls and error translation."""

    def test_upload_into_folder(self):
        storage = configured_storage()
        with patch("cloudinary.uploader.upload") as upload:
            upload.return_value = {
                "secure_url": "https://res.cloudinary.com/demo/image/upload/adminportal/x.jpg",
                "public_id": "adminportal/x",
                "bytes": 1234,
            }
            result = storage.upload("data:image/png;base64,AAAA")

        upload.assert_called_once_with("data:image/png;base64,AAAA", folder="adminportal")
        assert result == {
            "url": "https://res.cloudinary.com/demo/image/upload/adminportal/x.jpg",
            "public_id": "adminportal/x",
        }

    def test_upload_failure(self):
        storage = configured_storage()
        with patch("cloudinary.uploader.upload") as upload:
            upload.side_effect = CloudinaryError("Invalid image file")
            with pytest.raises(StorageError):
                storage.upload("not-an-image")

    def test_destroy(self):
        storage = configured_storage()
        with patch("cloudinary.uploader.destroy") as destroy:
            destroy.return_value = {"result": "ok"}
            assert storage.destroy("adminportal/x") == "ok"
        destroy.assert_called_once_with("adminportal/x")

    def test_destroy_failure(self):
        storage = configured_storage()
        with patch("cloudinary.uploader.destroy") as destroy:
            destroy.side_effect = CloudinaryError("boom")
            with pytest.raises(StorageError):
                storage.destroy("adminportal/x")

    def test_unconfigured_storage(self):
        storage = ImageStorage(
            Settings(cloudinary_cloud_name="", cloudinary_api_key="", cloudinary_api_secret="")
        )
        with patch("cloudinary.uploader.upload") as upload:
            with pytest.raises(StorageError):
                storage.upload("data:image/png;base64,AAAA")
        upload.assert_not_called()
