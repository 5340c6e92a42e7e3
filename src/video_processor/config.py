"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    secure: bool = False
    raw_bucket_name: str = "raw-videos"
    processed_bucket_name: str = "processed-videos"


class ScratchConfig(BaseModel, frozen=True):
    """Local scratch directories used during a pipeline run."""

    raw_path: str = "./raw-videos"
    processed_path: str = "./processed-videos"


class TranscodeConfig(BaseModel, frozen=True):
    """Transcode engine configuration."""

    target_height: int = 360
    timeout_seconds: float | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    scratch: ScratchConfig
    transcode: TranscodeConfig


def _optional_float(name: str) -> float | None:
    value = os.getenv(name)
    return float(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            secure=os.getenv("MINIO_SECURE", "false").lower() == "true",
            raw_bucket_name=os.getenv("RAW_BUCKET", "raw-videos"),
            processed_bucket_name=os.getenv("PROCESSED_BUCKET", "processed-videos"),
        ),
        scratch=ScratchConfig(
            raw_path=os.getenv("LOCAL_RAW_PATH", "./raw-videos"),
            processed_path=os.getenv("LOCAL_PROCESSED_PATH", "./processed-videos"),
        ),
        transcode=TranscodeConfig(
            target_height=int(os.getenv("TARGET_HEIGHT", "360")),
            timeout_seconds=_optional_float("TRANSCODE_TIMEOUT_SECONDS"),
        ),
    )
