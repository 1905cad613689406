"""End-to-end tests for the validate -> generate -> analyze pipeline."""

import pytest

from artstudio.schemas import ArtGenerationError, ArtGenerationSuccess
from artstudio.services.art_analyzer import ArtAnalyzer
from artstudio.services.art_generator import NO_CONTENT_MESSAGE, ArtGenerator
from artstudio.services.capabilities import MediaPart, TextPart
from artstudio.services.orchestrator import SERVER_ERROR_KEY, ArtStudio, PipelineStage
from artstudio.services.safety import STYLE_GUIDED_SAFETY_POLICY

from .conftest import GENERATED_URI, REFERENCE_URI, FakeImageModel, FakeTextModel

PROMPT = "A cubist jazz band at night"


@pytest.mark.asyncio
async def test_unconditioned_scenario(studio, image_model, text_model):
    result = await studio.generate(
        {"prompt": PROMPT, "artisticMovement": "Cubism", "colorMood": "Vibrant"}
    )

    assert isinstance(result, ArtGenerationSuccess)
    assert result.art_data_uri == GENERATED_URI
    assert result.analysis.textual_analysis == text_model.text
    assert result.style_strength == 0

    call = image_model.calls[0]
    assert call.safety_policy is None
    [part] = call.parts
    assert "Cubism" in part.text and "Vibrant" in part.text
    assert "Style Reference Image Used: No" in text_model.prompts[0]


@pytest.mark.asyncio
async def test_style_guided_scenario(studio, image_model, text_model):
    result = await studio.generate(
        {
            "prompt": PROMPT,
            "styleReference": REFERENCE_URI,
            "artisticMovement": "Cubism",
            "colorMood": "Vibrant",
            "styleStrength": "75",
        }
    )

    assert isinstance(result, ArtGenerationSuccess)
    assert result.style_strength == 75
    assert [(s.name, s.value) for s in result.influence] == [("Prompt Influence", 25), ("Style Influence", 75)]

    call = image_model.calls[0]
    assert call.safety_policy is STYLE_GUIDED_SAFETY_POLICY
    assert isinstance(call.parts[0], MediaPart)
    assert isinstance(call.parts[1], TextPart)
    assert "75" in call.parts[1].text
    assert "Yes (with a strength of 75%)" in text_model.prompts[0]


@pytest.mark.asyncio
@pytest.mark.parametrize("strength", [0, 10, 33.5, 100])
async def test_applied_strength_echoes_request(studio, strength):
    result = await studio.generate({"prompt": PROMPT, "styleReference": REFERENCE_URI, "styleStrength": strength})
    assert result.style_strength == strength


@pytest.mark.asyncio
async def test_strength_without_reference_is_not_applied(studio, image_model):
    result = await studio.generate({"prompt": PROMPT, "styleStrength": 80})

    assert result.style_strength == 0
    assert image_model.calls[0].safety_policy is None
    assert "80" not in image_model.calls[0].parts[0].text


@pytest.mark.asyncio
async def test_reference_without_strength_applies_zero(studio, image_model):
    result = await studio.generate({"prompt": PROMPT, "styleReference": REFERENCE_URI})

    assert result.style_strength == 0
    assert "subtle influence" in image_model.calls[0].parts[1].text


@pytest.mark.asyncio
@pytest.mark.parametrize("prompt", ["", "    "])
async def test_invalid_input_makes_no_model_calls(studio, image_model, text_model, prompt):
    result = await studio.generate({"prompt": prompt})

    assert isinstance(result, ArtGenerationError)
    assert result.error == {"prompt": ["Prompt cannot be empty."]}
    assert result.stage == PipelineStage.VALIDATING.value
    assert image_model.calls == []
    assert text_model.prompts == []


@pytest.mark.asyncio
async def test_failed_generation_skips_analysis():
    text_model = FakeTextModel()
    studio = ArtStudio(ArtGenerator(FakeImageModel(media=None)), ArtAnalyzer(text_model))

    result = await studio.generate({"prompt": PROMPT})

    assert isinstance(result, ArtGenerationError)
    assert result.error == {SERVER_ERROR_KEY: [NO_CONTENT_MESSAGE]}
    assert result.stage == PipelineStage.DISPATCHING.value
    assert text_model.prompts == []


@pytest.mark.asyncio
async def test_failed_analysis_discards_image():
    image_model = FakeImageModel()
    studio = ArtStudio(ArtGenerator(image_model), ArtAnalyzer(FakeTextModel(error=RuntimeError("critic offline"))))

    result = await studio.generate({"prompt": PROMPT})

    assert isinstance(result, ArtGenerationError)
    assert result.error == {SERVER_ERROR_KEY: ["critic offline"]}
    assert result.stage == PipelineStage.ANALYZING.value
    assert len(image_model.calls) == 1
    assert GENERATED_URI not in str(result.model_dump())


@pytest.mark.asyncio
async def test_wire_shapes(studio):
    success = await studio.generate({"prompt": PROMPT})
    failure = await studio.generate({"prompt": ""})

    assert success.model_dump(by_alias=True) == {
        "success": True,
        "artDataUri": GENERATED_URI,
        "analysis": {"textualAnalysis": "A bold fracture of rhythm and color."},
        "styleStrength": 0,
        "influence": [{"name": "Prompt Influence", "value": 100}],
    }
    assert failure.model_dump(by_alias=True) == {
        "success": False,
        "error": {"prompt": ["Prompt cannot be empty."]},
    }


@pytest.mark.asyncio
async def test_prompt_and_echo_agree_on_fractional_strength(studio, image_model):
    result = await studio.generate({"prompt": PROMPT, "styleReference": REFERENCE_URI, "styleStrength": 33.3333333})

    assert result.style_strength == 33.3333333
    assert "33.3333333/100" in image_model.calls[0].parts[1].text
