import asyncio
import json
from typing import Callable, List, Optional

import pytest

from film_studio.generation.agents.backends import GenerationBackend


class FakeUpload:
    """Stands in for Streamlit's UploadedFile."""

    def __init__(self, data: bytes, type: str, name: str = "concept.png", size: Optional[int] = None):
        self._data = data
        self.type = type
        self.name = name
        self.size = len(data) if size is None else size
        self.file_id = f"{name}-{self.size}"

    def getvalue(self) -> bytes:
        return self._data


class BrokenUpload(FakeUpload):
    def getvalue(self) -> bytes:
        raise OSError("disk read failed")


class FakeBackend(GenerationBackend):
    provider = "fake"

    def __init__(
        self,
        responses: Optional[List[str]] = None,
        error: Optional[Exception] = None,
        delay: float = 0,
        on_call: Optional[Callable[[], None]] = None
    ):
        super().__init__({"model": "fake-model", "temperature": 0})
        self.responses = list(responses or [])
        self.error = error
        self.delay = delay
        self.on_call = on_call
        self.calls = []

    async def _generate(self, template_name, instructions, prompt, media):
        self.calls.append({
            "template_name": template_name,
            "instructions": instructions,
            "prompt": prompt,
            "media": list(media),
        })
        if self.on_call:
            self.on_call()
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


STORYBOARD_JSON = json.dumps({
    "storyboard": [
        {
            "sceneDescription": "A detective pushes open the warehouse door.",
            "cameraAngle": "Low angle from inside the warehouse",
            "sceneLayout": "Door frame centered, silhouette backlit by streetlight",
        },
        {
            "sceneDescription": "The detective sweeps a flashlight across crates.",
            "cameraAngle": "Over-the-shoulder",
            "sceneLayout": "Crates stacked on the left, beam cutting across frame",
        },
    ]
})


@pytest.fixture
def storyboard_json() -> str:
    return STORYBOARD_JSON


@pytest.fixture
def png_upload() -> FakeUpload:
    return FakeUpload(b"\x89PNG\r\n\x1a\n" + b"\x00" * 64, "image/png", name="concept.png")


@pytest.fixture
def jpeg_upload_2mb() -> FakeUpload:
    data = b"\xff\xd8\xff\xe0" + b"\x00" * (2 * 1024 * 1024 - 4)
    return FakeUpload(data, "image/jpeg", name="helmet.jpg")


@pytest.fixture
def notifications():
    return []
