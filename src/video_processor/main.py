"""
Video Processor Service.

Receives push notifications that a raw video landed in the raw bucket and
runs a single pipeline per notification:
- Downloading the raw video into local scratch storage.
- Downscaling it to 360p with MoviePy (ffmpeg).
- Publishing the result to the processed bucket as a public object.
- Removing both local scratch files on every exit path.

Distributed tracing with Datadog and structured JSON logging.
"""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI
from pydantic import BaseModel

from video_processor import dependencies
from video_processor.routes import process_router

patch_all()


class HealthResponse(BaseModel):
    status: str
    service: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    dependencies.prepare()
    yield


app = FastAPI(title="Video Processing Service", lifespan=lifespan)
app.include_router(process_router)


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health() -> HealthResponse:
    return HealthResponse(status="ok", service="video-processor")
