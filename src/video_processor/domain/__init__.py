"""Domain layer containing trigger decoding and pipeline models."""

from .models import (
    FileArrivalEvent,
    PipelineRun,
    RunOutcome,
    ScratchRole,
    processed_name_for,
    scratch_name_for,
)
from .trigger_decoder import decode_trigger

__all__ = [
    "FileArrivalEvent",
    "PipelineRun",
    "RunOutcome",
    "ScratchRole",
    "decode_trigger",
    "processed_name_for",
    "scratch_name_for",
]
