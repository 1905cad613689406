from typing import List, Optional


def format_number(value: float) -> str:
    """Render 75.0 as '75' and keep every digit of fractional values."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def _movement_clause(artistic_movement: Optional[str]) -> str:
    return f" The piece should strongly embody the style of {artistic_movement}."


def _color_mood_clause(color_mood: Optional[str]) -> str:
    return (
        f" The color palette must evoke a {color_mood} mood, "
        "using a sophisticated and harmonious range of colors."
    )


def synthesize_unconditioned_prompt(
    prompt: str,
    artistic_movement: Optional[str] = None,
    color_mood: Optional[str] = None,
) -> str:
    """Build the text-only image prompt. Movement then color mood, each only when given."""
    text = (
        "Generate a high-resolution, visually stunning piece of abstract art. "
        f'The core concept is: "{prompt}". '
        "The artwork should be a complex and emotionally resonant masterpiece, suitable for a modern art gallery. "
        "Avoid literal interpretations; focus on abstract forms, textures, and the interplay of light and shadow."
    )
    if _present(artistic_movement):
        text += _movement_clause(artistic_movement)
    if _present(color_mood):
        text += _color_mood_clause(color_mood)
    return text


def synthesize_style_guided_prompt(
    prompt: str,
    artistic_movement: Optional[str] = None,
    color_mood: Optional[str] = None,
    style_strength: Optional[float] = None,
) -> str:
    """Build the text part sent alongside a reference image.

    Always ends with exactly one influence clause: a fusion clause naming the
    strength when one is given (0 included), otherwise a subtle-influence clause.
    """
    lines: List[str] = [
        f'As a master AI artist, create a new abstract artwork based on the core concept: "{prompt}".'
    ]
    if _present(artistic_movement):
        lines.append(f"Incorporate stylistic elements from the {artistic_movement} movement.")
    if _present(color_mood):
        lines.append(f"The overall color palette should evoke a {color_mood} mood.")

    if style_strength is not None:
        influence = f"with an influence level of {format_number(style_strength)}/100"
    else:
        influence = "with a subtle influence"
    lines.append(
        "Deeply analyze the provided reference image and emulate its visual style, color palette, and textures. "
        f"The fusion should be seamless, with the style applied {influence} to the core concept."
    )
    return "\n".join(lines)


def synthesize_analysis_prompt(
    prompt: str,
    style_reference_used: bool,
    artistic_movement: Optional[str] = None,
    color_mood: Optional[str] = None,
    style_strength: Optional[float] = None,
) -> str:
    """Critique template describing how the artwork was made."""
    if not style_reference_used:
        reference_text = "No"
    elif style_strength is not None:
        reference_text = f"Yes (with a strength of {format_number(style_strength)}%)"
    else:
        reference_text = "Yes (strength not specified)"
    movement_text = artistic_movement if _present(artistic_movement) else "Not specified"
    mood_text = color_mood if _present(color_mood) else "Not specified"

    return (
        "You are an insightful and concise art critic. You are analyzing a piece of AI-generated abstract art.\n"
        "Your analysis should explain how the final piece reflects the inputs that were used to create it.\n\n"
        "Creation Inputs:\n"
        f'- Main Concept/Prompt: "{prompt}"\n'
        f"- Style Reference Image Used: {reference_text}\n"
        f"- Specified Artistic Movement: {movement_text}\n"
        f"- Specified Color Mood: {mood_text}\n\n"
        "Based on these inputs, provide a brief, 2-3 sentence analysis of the resulting artwork. "
        "Be creative and insightful."
    )
