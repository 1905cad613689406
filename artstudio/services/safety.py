"""Content-safety thresholds attached to style-guided generation.

The table is fixed configuration: every style-guided image request carries it
verbatim and unconditioned requests carry none. Enum values are the provider's
category and threshold names.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class HarmCategory(str, Enum):
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
    HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"


class BlockThreshold(str, Enum):
    # Ordered from least to most strict.
    NONE = "BLOCK_NONE"
    ONLY_HIGH = "BLOCK_ONLY_HIGH"
    MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"


SafetyPolicy = Mapping[HarmCategory, BlockThreshold]

STYLE_GUIDED_SAFETY_POLICY: SafetyPolicy = MappingProxyType(
    {
        HarmCategory.HATE_SPEECH: BlockThreshold.ONLY_HIGH,
        HarmCategory.DANGEROUS_CONTENT: BlockThreshold.NONE,
        HarmCategory.HARASSMENT: BlockThreshold.MEDIUM_AND_ABOVE,
        HarmCategory.SEXUALLY_EXPLICIT: BlockThreshold.LOW_AND_ABOVE,
    }
)
