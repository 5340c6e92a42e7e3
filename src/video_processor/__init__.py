from video_processor.config import AppConfig, load_config
from video_processor.exceptions import (
    RemoteFetchError,
    RemotePublishError,
    ScratchIOError,
    TranscodeError,
    TriggerValidationError,
)
from video_processor.logging import setup_logging

__all__ = [
    "AppConfig",
    "load_config",
    "setup_logging",
    "RemoteFetchError",
    "RemotePublishError",
    "ScratchIOError",
    "TranscodeError",
    "TriggerValidationError",
]
