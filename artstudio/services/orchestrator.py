import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from ..errors import ArtStudioError, InvalidRequest
from ..schemas import ArtGenerationError, ArtGenerationSuccess, GenerationRequest
from .art_analyzer import ArtAnalyzer, influence_breakdown
from .art_generator import ArtGenerator

logger = logging.getLogger(__name__)

# Error-map key for failures that are not tied to an input field.
SERVER_ERROR_KEY = "_server"
# Error-map key for input that is not an object at all.
FORM_ERROR_KEY = "_form"

_WIRE_NAMES = {name: info.alias or name for name, info in GenerationRequest.model_fields.items()}

GenerationResult = Union[ArtGenerationSuccess, ArtGenerationError]


class PipelineStage(str, Enum):
    VALIDATING = "validating"
    DISPATCHING = "dispatching"
    ANALYZING = "analyzing"
    DONE = "done"


@dataclass(frozen=True)
class ValidationResult:
    request: Optional[GenerationRequest] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.request is not None


def _field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = _WIRE_NAMES.get(str(loc[0]), str(loc[0])) if loc else FORM_ERROR_KEY
        errors.setdefault(key, []).append(error["msg"])
    return errors


def parse_generation_request(raw: Any) -> GenerationRequest:
    """Build a GenerationRequest from raw caller input or raise InvalidRequest with field errors."""
    try:
        return GenerationRequest.model_validate(raw)
    except ValidationError as exc:
        raise InvalidRequest(_field_errors(exc)) from exc


def validate_generation_request(raw: Any) -> ValidationResult:
    try:
        return ValidationResult(request=parse_generation_request(raw))
    except InvalidRequest as exc:
        return ValidationResult(errors=exc.field_errors)


class ArtStudio:
    """Validates a request, generates the art, then critiques it.

    The steps run strictly in that order: a rejected request never reaches a
    model, a failed generation never triggers an analysis, and a failed analysis
    fails the whole request even though an image was produced.
    """

    def __init__(self, generator: ArtGenerator | None = None, analyzer: ArtAnalyzer | None = None):
        self.generator = generator or ArtGenerator()
        self.analyzer = analyzer or ArtAnalyzer()

    async def generate(self, raw: Any) -> GenerationResult:
        validation = validate_generation_request(raw)
        if not validation.ok:
            logger.info("Rejected generation request; invalid fields: %s", ", ".join(sorted(validation.errors)))
            return ArtGenerationError(error=validation.errors, stage=PipelineStage.VALIDATING.value)

        request = validation.request
        stage = PipelineStage.DISPATCHING
        try:
            art_data_uri = await self.generator.dispatch(request)
            stage = PipelineStage.ANALYZING
            analysis = await self.analyzer.analyze(
                request.prompt,
                request.uses_style_reference,
                artistic_movement=request.artistic_movement,
                color_mood=request.color_mood,
                style_strength=request.style_strength,
            )
        except ArtStudioError as exc:
            logger.warning("Art generation failed while %s: %s", stage.value, exc.message)
            return ArtGenerationError(error={SERVER_ERROR_KEY: [exc.message]}, stage=stage.value)

        style_strength = (request.style_strength or 0) if request.uses_style_reference else 0
        logger.info("Art generation %s (style strength %s)", PipelineStage.DONE.value, style_strength)
        return ArtGenerationSuccess(
            art_data_uri=art_data_uri,
            analysis=analysis,
            style_strength=style_strength,
            influence=influence_breakdown(style_strength),
        )
