import base64
import logging
from typing import List, Optional, Sequence

from google import genai
from google.genai import types

from ..config import IMAGE_MODEL
from ..datauri import parse_data_uri, to_data_uri
from .capabilities import GeneratedMedia, MediaPart, PromptPart, TextPart
from .safety import SafetyPolicy

logger = logging.getLogger(__name__)


def build_safety_settings(policy: SafetyPolicy) -> List[types.SafetySetting]:
    return [
        types.SafetySetting(
            category=types.HarmCategory(category.value),
            threshold=types.HarmBlockThreshold(threshold.value),
        )
        for category, threshold in policy.items()
    ]


def build_contents(parts: Sequence[PromptPart]) -> List[types.Part]:
    """Convert ordered prompt parts to Gemini parts, keeping their order."""
    contents: List[types.Part] = []
    for part in parts:
        if isinstance(part, MediaPart):
            mime_type, data = parse_data_uri(part.url)
            contents.append(types.Part.from_bytes(data=data, mime_type=mime_type))
        elif isinstance(part, TextPart):
            contents.append(types.Part.from_text(text=part.text))
        else:
            raise TypeError(f"Unsupported prompt part: {part!r}")
    return contents


def first_inline_image(response: types.GenerateContentResponse) -> Optional[GeneratedMedia]:
    for candidate in response.candidates or []:
        if candidate.content is None:
            continue
        for part in candidate.content.parts or []:
            inline = part.inline_data
            if inline is None or not inline.data:
                continue
            data = inline.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            mime_type = inline.mime_type or "image/png"
            return GeneratedMedia(url=to_data_uri(mime_type, data), content_type=mime_type)
    return None


class GeminiImageModel:
    """Image capability backed by a Gemini image-generation model."""

    def __init__(self, client: genai.Client | None = None, model: str = IMAGE_MODEL):
        self._client = client
        self.model = model

    @property
    def client(self) -> genai.Client:
        # Created on first use so the app can start without provider keys.
        if self._client is None:
            self._client = genai.Client()
        return self._client

    async def generate_image(
        self,
        parts: Sequence[PromptPart],
        modalities: Sequence[str],
        safety_policy: Optional[SafetyPolicy] = None,
    ) -> Optional[GeneratedMedia]:
        config = types.GenerateContentConfig(
            response_modalities=list(modalities),
            safety_settings=build_safety_settings(safety_policy) if safety_policy else None,
        )
        logger.debug("Calling %s with %d prompt part(s)", self.model, len(parts))
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=build_contents(parts),
            config=config,
        )
        return first_inline_image(response)
