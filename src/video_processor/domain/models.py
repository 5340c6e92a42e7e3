"""Domain models for the video processing pipeline."""

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field

PROCESSED_PREFIX = "processed-"


class FileArrivalEvent(BaseModel, frozen=True):
    """Represents a raw video object that landed in the raw bucket."""

    name: str = Field(min_length=1)


class ScratchRole(str, Enum):
    """Which local scratch directory a file lives in."""

    RAW = "raw"
    PROCESSED = "processed"


class RunOutcome(str, Enum):
    """Terminal outcome of a single pipeline run."""

    SUCCESS = "success"
    VALIDATION_REJECTED = "validation_rejected"
    DOWNLOAD_FAILED = "download_failed"
    TRANSCODE_FAILED = "transcode_failed"
    PUBLISH_FAILED = "publish_failed"


class PipelineRun(BaseModel, frozen=True):
    """Result of one pipeline invocation. Never persisted."""

    input_file_name: str
    output_file_name: str
    outcome: RunOutcome
    detail: str = ""

    @property
    def succeeded(self) -> bool:
        return self.outcome is RunOutcome.SUCCESS


def processed_name_for(raw_name: str) -> str:
    """Derives the processed object name from the raw object name."""
    return f"{PROCESSED_PREFIX}{raw_name}"


def scratch_name_for(object_name: str) -> str:
    """
    Flattens an object key into a single local file name.

    Path separators are percent-encoded, so ``uploads/a.mp4`` becomes
    ``uploads%2Fa.mp4``. Distinct keys always map to distinct names.
    """
    flat = quote(object_name, safe="")
    if not flat.strip("."):
        # "." and ".." would name a directory.
        flat = flat.replace(".", "%2E")
    return flat
