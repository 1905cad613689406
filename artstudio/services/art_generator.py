import logging
from typing import List, Optional

from ..config import RESPONSE_MODALITIES
from ..errors import GenerationFailure
from ..schemas import GenerationRequest
from .capabilities import ImageModel, MediaPart, PromptPart, TextPart
from .gemini_image import GeminiImageModel
from .prompts import synthesize_style_guided_prompt, synthesize_unconditioned_prompt
from .safety import STYLE_GUIDED_SAFETY_POLICY, SafetyPolicy

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "Image generation failed or returned no content."


class GenerationStrategy:
    """One way of turning a request into an image-model call."""

    name = "base"
    safety_policy: Optional[SafetyPolicy] = None

    def build_parts(self, request: GenerationRequest) -> List[PromptPart]:
        raise NotImplementedError

    async def invoke(self, model: ImageModel, request: GenerationRequest) -> str:
        parts = self.build_parts(request)
        try:
            media = await model.generate_image(parts, RESPONSE_MODALITIES, self.safety_policy)
        except Exception as exc:
            raise GenerationFailure(str(exc) or NO_CONTENT_MESSAGE) from exc

        if media is None or not media.url:
            raise GenerationFailure(NO_CONTENT_MESSAGE)
        return media.url


class UnconditionedStrategy(GenerationStrategy):
    name = "unconditioned"

    def build_parts(self, request: GenerationRequest) -> List[PromptPart]:
        text = synthesize_unconditioned_prompt(
            request.prompt,
            artistic_movement=request.artistic_movement,
            color_mood=request.color_mood,
        )
        return [TextPart(text)]


class StyleGuidedStrategy(GenerationStrategy):
    name = "style-guided"
    safety_policy = STYLE_GUIDED_SAFETY_POLICY

    def build_parts(self, request: GenerationRequest) -> List[PromptPart]:
        if request.style_reference is None:
            raise ValueError("Style-guided generation requires a style reference.")
        text = synthesize_style_guided_prompt(
            request.prompt,
            artistic_movement=request.artistic_movement,
            color_mood=request.color_mood,
            style_strength=request.style_strength,
        )
        # Reference image first, then the instructions.
        return [MediaPart(request.style_reference), TextPart(text)]


def select_strategy(request: GenerationRequest) -> GenerationStrategy:
    if request.uses_style_reference:
        return StyleGuidedStrategy()
    return UnconditionedStrategy()


class ArtGenerator:
    """Runs the strategy matching the request against the image model. No retries."""

    def __init__(self, model: ImageModel | None = None):
        self.model = model or GeminiImageModel()

    async def dispatch(self, request: GenerationRequest) -> str:
        strategy = select_strategy(request)
        logger.info("Generating art with the %s strategy", strategy.name)
        return await strategy.invoke(self.model, request)
