"""Boundary to the external generative models.

The pipeline only depends on these shapes; provider adapters live in
`gemini_image` and `openai_text`.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Type, TypeVar, Union

from pydantic import BaseModel

from .safety import SafetyPolicy


@dataclass(frozen=True)
class MediaPart:
    url: str  # data URI


@dataclass(frozen=True)
class TextPart:
    text: str


PromptPart = Union[MediaPart, TextPart]


@dataclass(frozen=True)
class GeneratedMedia:
    url: Optional[str]
    content_type: Optional[str] = None


SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ImageModel(Protocol):
    async def generate_image(
        self,
        parts: Sequence[PromptPart],
        modalities: Sequence[str],
        safety_policy: Optional[SafetyPolicy] = None,
    ) -> Optional[GeneratedMedia]:
        """Return the first generated media, or None when the model produced none."""
        ...


class TextModel(Protocol):
    async def generate_text(self, prompt: str, schema: Type[SchemaT]) -> SchemaT:
        ...
