import asyncio
import base64
import json
from pathlib import Path

import pytest

from video_processor.config import ScratchConfig
from video_processor.exceptions import RemoteFetchError, RemotePublishError, TranscodeError
from video_processor.handlers import VideoMessageHandler
from video_processor.infrastructure import LocalScratch
from video_processor.infrastructure.interfaces import ObjectGateway, Transcoder


def make_envelope(payload) -> dict:
    data = base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")
    return {"message": {"data": data}}


class FakeGateway(ObjectGateway):
    """In-memory raw/processed buckets."""

    def __init__(self, raw_objects: dict[str, bytes] | None = None):
        self.raw_objects = dict(raw_objects or {})
        self.processed_objects: dict[str, bytes] = {}
        self.public: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.fail_publish = False
        self.partial_fetch = False

    async def fetch(self, object_name: str, destination: Path) -> None:
        self.calls.append(("fetch", object_name))
        if object_name not in self.raw_objects:
            if self.partial_fetch:
                destination.write_bytes(b"partial")
            raise RemoteFetchError(object_name)
        destination.write_bytes(self.raw_objects[object_name])

    async def publish(self, source: Path, object_name: str) -> None:
        self.calls.append(("publish", object_name))
        if self.fail_publish:
            raise RemotePublishError(object_name)
        self.processed_objects[object_name] = source.read_bytes()
        self.public.add(object_name)

    def ensure_buckets(self) -> None:
        self.calls.append(("ensure_buckets", ""))


class FakeTranscoder(Transcoder):
    """Writes a marker file, or fails for configured input names."""

    def __init__(self, failing: set[str] | None = None, write_partial: bool = False):
        self.failing = failing or set()
        self.write_partial = write_partial
        self.calls: list[tuple[Path, Path]] = []
        self.active: dict[str, int] = {}
        self.max_active = 0
        self.max_active_per_name: dict[str, int] = {}
        self.delay = 0.0

    async def transcode(self, input_path: Path, output_path: Path) -> None:
        self.calls.append((input_path, output_path))
        name = input_path.name
        self.active[name] = self.active.get(name, 0) + 1
        self.max_active = max(self.max_active, sum(self.active.values()))
        self.max_active_per_name[name] = max(
            self.max_active_per_name.get(name, 0), self.active[name]
        )
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if name in self.failing:
                if self.write_partial:
                    output_path.write_bytes(b"half")
                raise TranscodeError(name, "Invalid data found when processing input")
            output_path.write_bytes(b"360p:" + input_path.read_bytes())
        finally:
            self.active[name] -= 1


@pytest.fixture
def scratch(tmp_path: Path) -> LocalScratch:
    local = LocalScratch(
        ScratchConfig(
            raw_path=str(tmp_path / "raw-videos"),
            processed_path=str(tmp_path / "processed-videos"),
        )
    )
    local.ensure_scratch_space()
    return local


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway({"vid1.mp4": b"raw-bytes", "bad.mov": b"garbage"})


@pytest.fixture
def transcoder() -> FakeTranscoder:
    return FakeTranscoder(failing={"bad.mov"})


@pytest.fixture
def handler(scratch, gateway, transcoder) -> VideoMessageHandler:
    return VideoMessageHandler(scratch, gateway, transcoder)
