import logging
from typing import List, Optional

from ..errors import AnalysisFailure
from ..schemas import ArtAnalysis, InfluenceSlice
from .capabilities import TextModel
from .openai_text import OpenAITextModel
from .prompts import synthesize_analysis_prompt

logger = logging.getLogger(__name__)


def influence_breakdown(style_strength: float) -> List[InfluenceSlice]:
    """Split 100% between the prompt and the style reference."""
    if style_strength > 0:
        return [
            InfluenceSlice(name="Prompt Influence", value=100 - style_strength),
            InfluenceSlice(name="Style Influence", value=style_strength),
        ]
    return [InfluenceSlice(name="Prompt Influence", value=100)]


class ArtAnalyzer:
    """Produces a short critique of an artwork from the inputs that created it."""

    def __init__(self, model: TextModel | None = None):
        self.model = model or OpenAITextModel()

    async def analyze(
        self,
        prompt: str,
        style_reference_used: bool,
        artistic_movement: Optional[str] = None,
        color_mood: Optional[str] = None,
        style_strength: Optional[float] = None,
    ) -> ArtAnalysis:
        critique_prompt = synthesize_analysis_prompt(
            prompt,
            style_reference_used,
            artistic_movement=artistic_movement,
            color_mood=color_mood,
            style_strength=style_strength,
        )
        try:
            analysis = await self.model.generate_text(critique_prompt, ArtAnalysis)
        except Exception as exc:
            raise AnalysisFailure(str(exc) or "Art analysis failed.") from exc

        text = analysis.textual_analysis.strip().replace("\n", " ") if analysis else ""
        if not text:
            raise AnalysisFailure("Art analysis returned no content.")
        return ArtAnalysis(textual_analysis=text)
