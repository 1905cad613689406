"""Shared fixtures: recording fakes for the image and text models."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import pytest

from artstudio.schemas import ArtAnalysis
from artstudio.services.art_analyzer import ArtAnalyzer
from artstudio.services.art_generator import ArtGenerator
from artstudio.services.capabilities import GeneratedMedia
from artstudio.services.orchestrator import ArtStudio

REFERENCE_URI = "data:image/png;base64,iVBORw0KGgo="
GENERATED_URI = "data:image/png;base64,R0VORVJBVEVE"


@dataclass
class ImageCall:
    parts: Sequence[Any]
    modalities: Sequence[str]
    safety_policy: Any


@dataclass
class FakeImageModel:
    media: Optional[GeneratedMedia] = field(default_factory=lambda: GeneratedMedia(url=GENERATED_URI))
    error: Optional[Exception] = None
    calls: List[ImageCall] = field(default_factory=list)

    async def generate_image(self, parts, modalities, safety_policy=None):
        self.calls.append(ImageCall(list(parts), tuple(modalities), safety_policy))
        if self.error is not None:
            raise self.error
        return self.media


@dataclass
class FakeTextModel:
    text: str = "A bold fracture of rhythm and color."
    error: Optional[Exception] = None
    prompts: List[str] = field(default_factory=list)

    async def generate_text(self, prompt, schema):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return schema(textual_analysis=self.text)


@pytest.fixture
def image_model():
    return FakeImageModel()


@pytest.fixture
def text_model():
    return FakeTextModel()


@pytest.fixture
def studio(image_model, text_model):
    return ArtStudio(generator=ArtGenerator(image_model), analyzer=ArtAnalyzer(text_model))


@pytest.fixture
def analysis():
    return ArtAnalysis(textual_analysis="A bold fracture of rhythm and color.")
