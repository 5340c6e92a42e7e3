"""Abstract interface for transcode engine operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class Transcoder(ABC):
    """Abstract base class for video transcoding backends."""

    @abstractmethod
    async def transcode(self, input_path: Path, output_path: Path) -> None:
        """
        Downscales a video to the configured height, preserving aspect ratio.

        Completes exactly once: returns on success or raises on failure.

        Args:
            input_path: Local path of the raw video.
            output_path: Local path the processed video is written to.

        Raises:
            TranscodeError: If the engine reports a failure.
        """
