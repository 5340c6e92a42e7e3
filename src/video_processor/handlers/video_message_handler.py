"""Orchestrates the download, transcode, publish and cleanup pipeline."""

import asyncio
from typing import Any

from video_processor.domain import (
    FileArrivalEvent,
    PipelineRun,
    RunOutcome,
    ScratchRole,
    decode_trigger,
    processed_name_for,
    scratch_name_for,
)
from video_processor.exceptions import (
    RemoteFetchError,
    RemotePublishError,
    TranscodeError,
    TriggerValidationError,
)
from video_processor.infrastructure import LocalScratch
from video_processor.infrastructure.interfaces import ObjectGateway, Transcoder
from video_processor.logging import setup_logging
from video_processor.utils import KeyedLock

logger = setup_logging()


class VideoMessageHandler:
    """Runs one pipeline per trigger notification."""

    def __init__(
        self,
        scratch: LocalScratch,
        gateway: ObjectGateway,
        transcoder: Transcoder,
        locks: KeyedLock | None = None,
    ):
        self._scratch = scratch
        self._gateway = gateway
        self._transcoder = transcoder
        self._locks = locks or KeyedLock()

    async def handle(self, envelope: Any) -> PipelineRun:
        """
        Decodes a trigger envelope and runs the pipeline for it.

        Never raises for pipeline failures; the outcome is reported on the
        returned PipelineRun instead.
        """
        try:
            event = decode_trigger(envelope)
        except TriggerValidationError as e:
            logger.warning("Invalid trigger payload", extra={"reason": e.reason})
            return PipelineRun(
                input_file_name="",
                output_file_name="",
                outcome=RunOutcome.VALIDATION_REJECTED,
                detail=e.reason,
            )

        input_name = event.name
        output_name = processed_name_for(input_name)

        try:
            return await self.process(event)
        except RemoteFetchError as e:
            outcome, detail = RunOutcome.DOWNLOAD_FAILED, str(e)
        except TranscodeError as e:
            outcome, detail = RunOutcome.TRANSCODE_FAILED, e.diagnostic
        except RemotePublishError as e:
            outcome, detail = RunOutcome.PUBLISH_FAILED, str(e)

        return PipelineRun(
            input_file_name=input_name,
            output_file_name=output_name,
            outcome=outcome,
            detail=detail,
        )

    async def process(self, event: FileArrivalEvent) -> PipelineRun:
        """
        Downloads, transcodes and publishes a raw video.

        Both scratch files are removed on every exit path. At most one run per
        raw object name is in flight at a time.

        Args:
            event: The decoded file arrival event.

        Returns:
            PipelineRun describing the successful run.

        Raises:
            RemoteFetchError: If the raw video cannot be downloaded.
            TranscodeError: If the transcode engine fails.
            RemotePublishError: If the processed video cannot be published.
        """
        input_name = event.name
        output_name = processed_name_for(input_name)
        raw_scratch = scratch_name_for(input_name)
        processed_scratch = scratch_name_for(output_name)
        raw_path = self._scratch.path_for(ScratchRole.RAW, raw_scratch)
        processed_path = self._scratch.path_for(ScratchRole.PROCESSED, processed_scratch)

        async with self._locks.hold(input_name):
            logger.info(
                "Processing video",
                extra={"input_file": input_name, "output_file": output_name},
            )
            try:
                await self._gateway.fetch(input_name, raw_path)
                await self._transcoder.transcode(raw_path, processed_path)
                await self._gateway.publish(processed_path, output_name)
            except Exception:
                logger.exception(
                    "Video processing failed",
                    extra={"input_file": input_name, "output_file": output_name},
                )
                raise
            finally:
                await self._cleanup(raw_scratch, processed_scratch)

        logger.info(
            "Video processed",
            extra={"input_file": input_name, "output_file": output_name},
        )
        return PipelineRun(
            input_file_name=input_name,
            output_file_name=output_name,
            outcome=RunOutcome.SUCCESS,
        )

    async def _cleanup(self, raw_scratch: str, processed_scratch: str) -> None:
        """Deletes both scratch files independently; failures are only logged."""
        results = await asyncio.gather(
            self._scratch.delete(ScratchRole.RAW, raw_scratch),
            self._scratch.delete(ScratchRole.PROCESSED, processed_scratch),
            return_exceptions=True,
        )
        for file_name, result in zip((raw_scratch, processed_scratch), results):
            if isinstance(result, Exception):
                logger.error(
                    "Scratch cleanup failed",
                    extra={"scratch_file": file_name, "error": str(result)},
                )
