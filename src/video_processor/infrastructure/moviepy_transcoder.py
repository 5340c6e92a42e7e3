"""MoviePy implementation of the Transcoder interface."""

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

import moviepy

from video_processor.config import TranscodeConfig
from video_processor.exceptions import TranscodeError
from video_processor.logging import setup_logging

from .interfaces import Transcoder

logger = setup_logging()


def scaled_width(width: int, height: int, target_height: int) -> int:
    """Width that keeps the source aspect ratio at ``target_height``, rounded to even."""
    # libx264 rejects odd frame dimensions.
    return max(2, round(width * target_height / height / 2) * 2)


class MoviepyTranscoder(Transcoder):
    """Downscales videos to a fixed height using MoviePy (ffmpeg underneath)."""

    def __init__(
        self,
        config: TranscodeConfig,
        clip_factory: Callable[[str], Any] = moviepy.VideoFileClip,
    ):
        self._target_height = config.target_height
        self._timeout = config.timeout_seconds
        self._clip_factory = clip_factory

    async def transcode(self, input_path: Path, output_path: Path) -> None:
        """
        Transcodes ``input_path`` into ``output_path`` at the target height.

        The engine runs in a worker thread so other pipeline runs keep going.
        The engine thread cannot be interrupted, so a timeout marks the run as
        failed but only returns once the thread has stopped touching
        ``output_path``.
        """
        job = asyncio.ensure_future(
            asyncio.to_thread(self._transcode_sync, input_path, output_path)
        )
        if self._timeout is None:
            await job
            return

        try:
            await asyncio.wait_for(asyncio.shield(job), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                "Video processing timed out, waiting for the engine to stop",
                extra={"input": str(input_path), "timeout_seconds": self._timeout},
            )
            try:
                await job
            except TranscodeError as late:
                logger.warning(
                    "Engine failed after timeout",
                    extra={"input": str(input_path), "error": late.diagnostic},
                )
            raise TranscodeError(
                input_path.name, f"timed out after {self._timeout} seconds", e
            ) from e

    def _transcode_sync(self, input_path: Path, output_path: Path) -> None:
        try:
            clip = self._clip_factory(str(input_path))
        except Exception as e:
            logger.exception(
                "An error occurred while opening the video",
                extra={"input": str(input_path)},
            )
            raise TranscodeError(input_path.name, str(e), e) from e

        try:
            width, height = clip.size
            resized = clip.resized(
                new_size=(scaled_width(width, height, self._target_height), self._target_height)
            )
            resized.write_videofile(str(output_path), logger=None)
        except Exception as e:
            logger.exception(
                "An error occurred while processing the video",
                extra={"input": str(input_path), "output": str(output_path)},
            )
            raise TranscodeError(input_path.name, str(e), e) from e
        finally:
            clip.close()

        if not output_path.is_file():
            raise TranscodeError(input_path.name, "engine produced no output file")

        logger.info(
            "Video processing finished successfully",
            extra={"input": str(input_path), "output": str(output_path)},
        )
