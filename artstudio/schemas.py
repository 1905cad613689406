from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .datauri import is_image_data_uri


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerationRequest(_WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    prompt: str = Field(..., description="Text prompt describing the desired abstract art.")
    style_reference: Optional[str] = Field(
        None,
        description=(
            "A reference image to guide the art style, as a data URI that must include a MIME type "
            "and use Base64 encoding: 'data:<mimetype>;base64,<encoded_data>'."
        ),
    )
    artistic_movement: Optional[str] = Field(
        None, description="An artistic movement to influence the style (e.g., Cubism, Surrealism)."
    )
    color_mood: Optional[str] = Field(
        None, description="A color mood to influence the palette (e.g., Vibrant, Pastel)."
    )
    style_strength: Optional[float] = Field(
        None,
        ge=0,
        le=100,
        allow_inf_nan=False,
        description="How strongly to apply the style of the reference image (0-100).",
    )

    @field_validator("style_reference", "artistic_movement", "color_mood", "style_strength", mode="before")
    @classmethod
    def _blank_means_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("style_strength", mode="before")
    @classmethod
    def _strength_not_bool(cls, value):
        if isinstance(value, bool):
            raise PydanticCustomError("float_type", "Style strength must be a number.")
        return value

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank_prompt", "Prompt cannot be empty.")
        return value

    @field_validator("style_reference")
    @classmethod
    def _style_reference_is_image(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_image_data_uri(value):
            raise PydanticCustomError(
                "invalid_style_reference",
                "Style reference must be an image data URI ('data:image/<type>;base64,<data>').",
            )
        return value

    @property
    def uses_style_reference(self) -> bool:
        return self.style_reference is not None


class ArtAnalysis(_WireModel):
    textual_analysis: str = Field(
        ..., description="A brief, insightful analysis of the artwork (2-3 sentences)."
    )


class InfluenceSlice(_WireModel):
    name: str
    value: float


class ArtGenerationSuccess(_WireModel):
    success: Literal[True] = True
    art_data_uri: str
    analysis: ArtAnalysis
    style_strength: float
    influence: List[InfluenceSlice]


class ArtGenerationError(_WireModel):
    success: Literal[False] = False
    error: Dict[str, List[str]]
    # Pipeline stage that failed; kept off the wire.
    stage: Optional[str] = Field(None, exclude=True)


class HistoryResponse(_WireModel):
    entries: List[str]


class OptionsResponse(_WireModel):
    artistic_movements: List[str]
    color_moods: List[str]
    default_style_strength: int
    history_capacity: int
