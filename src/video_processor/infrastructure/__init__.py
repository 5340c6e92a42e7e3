"""Infrastructure implementations."""

from .local_scratch import LocalScratch
from .minio_gateway import MinioObjectGateway
from .moviepy_transcoder import MoviepyTranscoder

__all__ = ["LocalScratch", "MinioObjectGateway", "MoviepyTranscoder"]
