import os
from typing import List

from dotenv import load_dotenv

# Load environment variables (provider API keys included) from a local .env file if present.
load_dotenv()

# Model choices can be overridden via environment variables if desired.
IMAGE_MODEL = os.getenv("ART_IMAGE_MODEL", "gemini-2.0-flash-preview-image-generation")
ANALYSIS_MODEL = os.getenv("ART_ANALYSIS_MODEL", "gpt-4.1-mini")

# Image models are asked for combined text + image output.
RESPONSE_MODALITIES = ("TEXT", "IMAGE")

# Number of recent results kept per session.
HISTORY_CAPACITY = int(os.getenv("ART_HISTORY_CAPACITY", "5"))

# Slider default offered to the front end when a style reference is attached.
DEFAULT_STYLE_STRENGTH = int(os.getenv("ART_DEFAULT_STYLE_STRENGTH", "50"))

LOG_LEVEL = os.getenv("ART_LOG_LEVEL", "INFO").upper()

# Header carrying the caller's session id for history lookups.
SESSION_HEADER = "X-Session-Id"

# Vocabularies offered by the front end; the pipeline treats the values as opaque text.
ARTISTIC_MOVEMENTS = (
    "Abstract Expressionism",
    "Cubism",
    "Surrealism",
    "Impressionism",
    "Minimalism",
    "Futurism",
)
COLOR_MOODS = (
    "Vibrant",
    "Pastel",
    "Monochromatic",
    "Earthy",
    "Neon",
    "Sepia",
)


def cors_origins() -> List[str]:
    """Return allowed CORS origins from ART_CORS_ORIGINS (comma separated)."""
    raw = os.getenv("ART_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
