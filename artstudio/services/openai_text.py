import logging
from typing import Type

from openai import AsyncOpenAI

from ..config import ANALYSIS_MODEL
from .capabilities import SchemaT

logger = logging.getLogger(__name__)


class OpenAITextModel:
    """Text capability using the Responses API with structured output parsing."""

    def __init__(self, client: AsyncOpenAI | None = None, model: str = ANALYSIS_MODEL):
        self._client = client
        self.model = model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI()
        return self._client

    async def generate_text(self, prompt: str, schema: Type[SchemaT]) -> SchemaT:
        logger.debug("Calling %s for %s", self.model, schema.__name__)
        response = await self.client.responses.parse(
            model=self.model,
            input=[
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            text_format=schema,
        )
        parsed = response.output_parsed
        if parsed is None:
            raise RuntimeError(f"{self.model} returned no parsable {schema.__name__}.")
        return parsed
