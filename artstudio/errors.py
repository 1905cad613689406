from typing import Dict, List


class ArtStudioError(Exception):
    """Base class for failures surfaced to the caller of the art pipeline."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(ArtStudioError):
    """Raw input did not match the generation request shape. Raised before any model call."""

    def __init__(self, field_errors: Dict[str, List[str]]):
        super().__init__("Invalid generation request.")
        self.field_errors = field_errors


class GenerationFailure(ArtStudioError):
    """The image model failed or returned no usable media."""


class AnalysisFailure(ArtStudioError):
    """The text model failed to critique an already generated image."""
