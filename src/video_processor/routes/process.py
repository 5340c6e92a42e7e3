"""Push-trigger endpoint for raw video notifications."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from video_processor.dependencies import get_handler
from video_processor.domain import PipelineRun, RunOutcome
from video_processor.handlers import VideoMessageHandler
from video_processor.logging import setup_logging

logger = setup_logging()

router = APIRouter(tags=["processing"])

HandlerDep = Annotated[VideoMessageHandler, Depends(get_handler)]


def _response_for(run: PipelineRun) -> PlainTextResponse:
    if run.outcome is RunOutcome.VALIDATION_REJECTED:
        return PlainTextResponse(f"Bad Request: {run.detail}.", status_code=400)
    if run.outcome is RunOutcome.TRANSCODE_FAILED:
        return PlainTextResponse(
            "Internal Server Error: failed to process video.", status_code=500
        )
    if run.outcome is RunOutcome.DOWNLOAD_FAILED:
        return PlainTextResponse(
            "Internal Server Error: failed to download video.", status_code=500
        )
    if run.outcome is RunOutcome.PUBLISH_FAILED:
        return PlainTextResponse(
            "Internal Server Error: failed to upload processed video.", status_code=500
        )
    return PlainTextResponse("Processing finished successfully", status_code=200)


@router.post("/process-video", response_class=PlainTextResponse)
@router.post("/", response_class=PlainTextResponse)
async def process_video(request: Request, handler: HandlerDep) -> PlainTextResponse:
    """
    Handles a push notification announcing a new raw video.

    The body is ``{"message": {"data": <base64 JSON with "name">}}``.
    """
    body = await request.body()
    try:
        run = await handler.handle(body)
    except Exception:
        logger.exception("Unexpected pipeline failure")
        return PlainTextResponse(
            "Internal Server Error: failed to process video.", status_code=500
        )

    logger.info(
        "Trigger handled",
        extra={"input_file": run.input_file_name, "outcome": run.outcome.value},
    )
    return _response_for(run)
