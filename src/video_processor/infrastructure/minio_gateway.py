"""MinIO implementation of the ObjectGateway interface."""

import asyncio
import json
import mimetypes
import threading
from pathlib import Path

from minio import Minio
from minio.error import S3Error

from video_processor.config import MinioConfig
from video_processor.exceptions import RemoteFetchError, RemotePublishError
from video_processor.logging import setup_logging

from .interfaces import ObjectGateway

logger = setup_logging()

_POLICY_VERSION = "2012-10-17"


def _content_type(object_name: str) -> str:
    content_type, _ = mimetypes.guess_type(object_name)
    return content_type or "application/octet-stream"


class MinioObjectGateway(ObjectGateway):
    """Handles raw/processed object storage using MinIO."""

    def __init__(self, client: Minio, config: MinioConfig):
        self._client = client
        self._raw_bucket = config.raw_bucket_name
        self._processed_bucket = config.processed_bucket_name
        # Bucket policy updates are read-modify-write.
        self._policy_lock = threading.Lock()

    async def fetch(self, object_name: str, destination: Path) -> None:
        await asyncio.to_thread(self._fetch_sync, object_name, destination)

    async def publish(self, source: Path, object_name: str) -> None:
        await asyncio.to_thread(self._publish_sync, source, object_name)

    def ensure_buckets(self) -> None:
        for bucket_name in (self._raw_bucket, self._processed_bucket):
            if not self._client.bucket_exists(bucket_name=bucket_name):
                self._client.make_bucket(bucket_name=bucket_name)
                logger.info("Bucket created", extra={"bucket_name": bucket_name})
            else:
                logger.info("Bucket already exists", extra={"bucket_name": bucket_name})

    def _fetch_sync(self, object_name: str, destination: Path) -> None:
        try:
            self._client.fget_object(
                bucket_name=self._raw_bucket,
                object_name=object_name,
                file_path=str(destination),
            )
            logger.info(
                "File downloaded from MinIO",
                extra={
                    "bucket_name": self._raw_bucket,
                    "object_name": object_name,
                    "destination": str(destination),
                },
            )
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": self._raw_bucket, "object_name": object_name},
            )
            raise RemoteFetchError(object_name, e) from e

    def _publish_sync(self, source: Path, object_name: str) -> None:
        try:
            self._client.fput_object(
                bucket_name=self._processed_bucket,
                object_name=object_name,
                file_path=str(source),
                content_type=_content_type(object_name),
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "bucket_name": self._processed_bucket,
                    "object_name": object_name,
                    "source": str(source),
                },
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._processed_bucket, "object_name": object_name},
            )
            raise RemotePublishError(object_name, e) from e

        try:
            self._make_public(object_name)
        except Exception as e:
            logger.exception(
                "Making object public failed",
                extra={"bucket_name": self._processed_bucket, "object_name": object_name},
            )
            raise RemotePublishError(object_name, e) from e

    def _make_public(self, object_name: str) -> None:
        """Grants anonymous read on a single object via the bucket policy."""
        statement_id = f"PublicRead-{object_name}"
        with self._policy_lock:
            policy = self._current_policy()
            statements = policy.setdefault("Statement", [])
            if any(s.get("Sid") == statement_id for s in statements):
                return
            statements.append(
                {
                    "Sid": statement_id,
                    "Effect": "Allow",
                    "Principal": {"AWS": ["*"]},
                    "Action": ["s3:GetObject"],
                    "Resource": [f"arn:aws:s3:::{self._processed_bucket}/{object_name}"],
                }
            )
            self._client.set_bucket_policy(
                bucket_name=self._processed_bucket,
                policy=json.dumps(policy),
            )
        logger.info(
            "Object made public",
            extra={"bucket_name": self._processed_bucket, "object_name": object_name},
        )

    def _current_policy(self) -> dict:
        try:
            raw = self._client.get_bucket_policy(bucket_name=self._processed_bucket)
        except S3Error as e:
            if e.code == "NoSuchBucketPolicy":
                return {"Version": _POLICY_VERSION, "Statement": []}
            raise
        return json.loads(raw)
