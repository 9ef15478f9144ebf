# restaurant_api/utils/minio_client.py

import io
import json
import mimetypes
import uuid

from fastapi import HTTPException, UploadFile, status
from minio import Minio
from minio.error import S3Error

from restaurant_api.config.settings import (
    MINIO_ACCESS_KEY,
    MINIO_BUCKET,
    MINIO_ENDPOINT,
    MINIO_PUBLIC_ENDPOINT,
    MINIO_SECRET_KEY,
    MINIO_SECURE,
)
from restaurant_api.utils.logger import logger

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif", "image/svg+xml", "image/x-icon"}


def public_read_policy(bucket_name: str) -> str:
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"AWS": ["*"]},
            "Action": ["s3:GetObject"],
            "Resource": [f"arn:aws:s3:::{bucket_name}/*"],
        }],
    })


class MinioStorage:
    """Uploads images (product photos, theme logos) to a public-read MinIO bucket."""

    def __init__(self, client: Minio | None = None, bucket: str = MINIO_BUCKET):
        self._client = client
        self.bucket = bucket

    @property
    def client(self) -> Minio:
        if self._client is None:
            self._client = Minio(
                endpoint=MINIO_ENDPOINT,
                access_key=MINIO_ACCESS_KEY,
                secret_key=MINIO_SECRET_KEY,
                secure=MINIO_SECURE,
            )
        return self._client

    def _ensure_bucket(self) -> None:
        if not self.client.bucket_exists(self.bucket):
            logger.info(f"[MinIO] Creating bucket {self.bucket}")
            self.client.make_bucket(self.bucket)
            self.client.set_bucket_policy(self.bucket, public_read_policy(self.bucket))

    def public_url(self, object_name: str) -> str:
        base = MINIO_PUBLIC_ENDPOINT or f"{'https' if MINIO_SECURE else 'http'}://{MINIO_ENDPOINT}"
        return f"{base.rstrip('/')}/{self.bucket}/{object_name}"

    def upload_file(self, file: UploadFile, folder: str) -> str:
        content_type = file.content_type or mimetypes.guess_type(file.filename or "")[0] or ""
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Unsupported file type: {content_type or 'unknown'}")

        data = file.file.read()
        if not data:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Empty file")

        extension = mimetypes.guess_extension(content_type) or ""
        object_name = f"{folder}/{uuid.uuid4().hex}{extension}"
        try:
            self._ensure_bucket()
            self.client.put_object(
                self.bucket,
                object_name,
                io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
        except S3Error as e:
            logger.error(f"[MinIO] Upload of {object_name} failed: {e}")
            raise HTTPException(status.HTTP_502_BAD_GATEWAY, "Failed to upload file")

        url = self.public_url(object_name)
        logger.info(f"[MinIO] Uploaded {object_name}")
        return url


def get_storage() -> MinioStorage:
    return MinioStorage()
