"""Dependency injection configuration for the video processor."""

from minio import Minio

from video_processor.config import load_config
from video_processor.handlers import VideoMessageHandler
from video_processor.infrastructure import (
    LocalScratch,
    MinioObjectGateway,
    MoviepyTranscoder,
)
from video_processor.logging import setup_logging
from video_processor.utils import KeyedLock

logger = setup_logging()

_config = load_config()

_minio_client = Minio(
    endpoint=_config.minio.endpoint,
    access_key=_config.minio.user,
    secret_key=_config.minio.password,
    secure=_config.minio.secure,
)

_gateway = MinioObjectGateway(_minio_client, _config.minio)
_scratch = LocalScratch(_config.scratch)
_transcoder = MoviepyTranscoder(_config.transcode)

_handler = VideoMessageHandler(_scratch, _gateway, _transcoder, KeyedLock())


def prepare() -> None:
    """Creates scratch directories and buckets. Called once at process start."""
    _scratch.ensure_scratch_space()
    _gateway.ensure_buckets()


def get_handler() -> VideoMessageHandler:
    """Returns the shared pipeline handler."""
    return _handler
