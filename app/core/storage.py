"""
File storage abstraction layer supporting both local filesystem and AWS S3.

Uploaded verification selfies go through this interface so the API can switch
between local storage (development) and S3 (production) via USE_S3.
"""

import logging
import os
from typing import BinaryIO, Optional
import boto3
from botocore.exceptions import ClientError
from app.core.config import settings

logger = logging.getLogger(__name__)

# URL prefix under which local uploads are served (see main.py)
LOCAL_URL_PREFIX = "/uploads"


class StorageError(Exception):
    """Raised when a backend cannot persist a file"""


class StorageBackend:
    """Abstract base class for storage backends"""

    def save(self, file: BinaryIO, key: str, content_type: Optional[str] = None) -> str:
        """Store file under key and return its public path"""
        raise NotImplementedError

    def check(self) -> None:
        """Raise StorageError if the backend cannot currently accept uploads"""
        raise NotImplementedError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend"""

    def __init__(self, base_dir: str = "uploads"):
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    def _full_path(self, key: str) -> str:
        return os.path.join(self.base_dir, *key.split("/"))

    def save(self, file: BinaryIO, key: str, content_type: Optional[str] = None) -> str:
        """Write file below base_dir, creating sub-folders as needed"""
        file_path = self._full_path(key)
        os.makedirs(os.path.dirname(file_path), exist_ok=True)

        try:
            with open(file_path, "wb") as buffer:
                buffer.write(file.read())
        except OSError as e:
            raise StorageError(f"Failed to write {key}: {e}") from e

        return f"{LOCAL_URL_PREFIX}/{key}"

    def check(self) -> None:
        """base_dir must be an existing, writable directory"""
        if not os.path.isdir(self.base_dir):
            raise StorageError(f"Upload directory {self.base_dir} does not exist")
        if not os.access(self.base_dir, os.W_OK | os.X_OK):
            raise StorageError(f"Upload directory {self.base_dir} is not writable")


class S3Storage(StorageBackend):
    """AWS S3 storage backend"""

    def __init__(self):
        self.bucket_name = settings.S3_BUCKET_NAME

        # Without explicit keys boto3 falls back to IAM roles / instance profile
        if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
            self.s3_client = boto3.client(
                's3',
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_REGION
            )
        else:
            self.s3_client = boto3.client('s3', region_name=settings.AWS_REGION)

    def save(self, file: BinaryIO, key: str, content_type: Optional[str] = None) -> str:
        """Upload file to S3 and return the key as a public path"""
        extra_args = {'ServerSideEncryption': 'AES256'}
        if content_type:
            extra_args['ContentType'] = content_type

        try:
            self.s3_client.upload_fileobj(file, self.bucket_name, key, ExtraArgs=extra_args)
        except ClientError as e:
            logger.error(f"Error uploading {key} to S3: {e}")
            raise StorageError(f"Failed to upload {key} to S3") from e

        return f"/{key}"

    def check(self) -> None:
        """The bucket must exist and be reachable with the configured credentials"""
        try:
            self.s3_client.head_bucket(Bucket=self.bucket_name)
        except ClientError as e:
            raise StorageError(f"S3 bucket {self.bucket_name} is not accessible: {e}") from e


def build_storage() -> StorageBackend:
    """Get storage backend based on USE_S3 setting"""
    if settings.USE_S3:
        if not settings.S3_BUCKET_NAME:
            raise ValueError("S3_BUCKET_NAME must be set when USE_S3=True")
        return S3Storage()
    return LocalStorage(settings.UPLOAD_DIR)


_storage: Optional[StorageBackend] = None


def get_storage() -> StorageBackend:
    """
    Dependency returning the process-wide storage backend.
    Built on first use so importing the app never touches S3.
    """
    global _storage
    if _storage is None:
        _storage = build_storage()
    return _storage
