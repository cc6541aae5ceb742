"""
Image storage on S3 (or an S3-compatible endpoint) and in-memory testing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol
from uuid import uuid4

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from roster_api.errors import StoreError, UploadError

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class ImageStore(Protocol):
    """Defines the operations the API needs from object storage."""

    def upload_image(self, payload: bytes, content_type: str, filename: str) -> str:
        ...


def make_object_name(filename: str) -> str:
    return f"{uuid4()}-{filename}"


def check_payload(payload: bytes | None) -> None:
    """Reject missing or oversized payloads before touching the store."""
    if not payload:
        raise UploadError("No file uploaded")
    if len(payload) > MAX_UPLOAD_BYTES:
        raise UploadError(
            f"File too large (limit is {MAX_UPLOAD_BYTES // (1024 * 1024)}MB)"
        )


@dataclass
class InMemoryImageStore:
    """Test double for storage interactions."""

    base_url: str = "https://example.test/images"
    stored_objects: Dict[str, tuple[bytes, str]] = field(default_factory=dict)

    def upload_image(self, payload: bytes, content_type: str, filename: str) -> str:
        check_payload(payload)
        name = make_object_name(filename)
        self.stored_objects[name] = (payload, content_type)
        return f"{self.base_url}/{name}"


@dataclass
class S3ImageStore:
    """
    Uploads images to an S3 bucket and returns their public URL.

    The URL is built from the bucket and region (or ``public_base_url`` when
    set); whether the object is actually publicly readable depends on the
    bucket policy.
    """

    bucket: str
    region: str
    endpoint: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    public_base_url: Optional[str] = None
    client: object = None

    def __post_init__(self):
        if self.client is None:
            config = Config(signature_version="s3v4")
            self.client = boto3.client(
                "s3",
                endpoint_url=self.endpoint,
                region_name=self.region,
                aws_access_key_id=self.access_key_id,
                aws_secret_access_key=self.secret_access_key,
                config=config,
            )

    def public_url(self, name: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{name}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{name}"

    def upload_image(self, payload: bytes, content_type: str, filename: str) -> str:
        check_payload(payload)
        name = make_object_name(filename)
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=name,
                Body=payload,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StoreError("Failed to upload image") from exc
        logger.info("Uploaded %s (%d bytes) to %s", name, len(payload), self.bucket)
        return self.public_url(name)
