#!/usr/bin/env python3
"""
Command-line entry point for a single art generation request.

  prompt (+ optional reference image, movement, mood, strength)
    -> image model (unconditioned or style-guided)
    -> text model critique
    -> PNG/JPEG on disk + <out>.json metadata, or JSON on stdout

Env (.env):

  GEMINI_API_KEY=...     # image model
  OPENAI_API_KEY=...     # critique model
"""

import argparse
import asyncio
import json
import logging
import mimetypes
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import LOG_LEVEL
from .datauri import parse_data_uri, to_data_uri
from .schemas import ArtGenerationSuccess
from .services.orchestrator import ArtStudio

logger = logging.getLogger(__name__)


def _read_prompt(prompt: Optional[str]) -> str:
    if prompt:
        return prompt
    return sys.stdin.read().strip()


def _reference_as_data_uri(path: str) -> str:
    mime_type, _ = mimetypes.guess_type(path)
    if not mime_type or not mime_type.startswith("image/"):
        raise SystemExit(f"Cannot tell the image type of style reference: {path}")
    with open(path, "rb") as f:
        return to_data_uri(mime_type, f.read())


def build_raw_request(args: argparse.Namespace, prompt: str) -> Dict[str, Any]:
    raw: Dict[str, Any] = {"prompt": prompt}
    if args.style_reference:
        raw["styleReference"] = _reference_as_data_uri(args.style_reference)
    if args.movement:
        raw["artisticMovement"] = args.movement
    if args.mood:
        raw["colorMood"] = args.mood
    if args.strength is not None:
        raw["styleStrength"] = args.strength
    return raw


def save_art(result: ArtGenerationSuccess, out_path: Path) -> Dict[str, Any]:
    """
    Write the image to out_path (extension follows the returned MIME type)
    and a metadata sidecar next to it. Returns the metadata.
    """
    mime_type, data = parse_data_uri(result.art_data_uri)
    suffix = mimetypes.guess_extension(mime_type) or ".png"
    image_path = out_path.with_suffix(suffix)
    image_path.parent.mkdir(parents=True, exist_ok=True)
    image_path.write_bytes(data)

    meta: Dict[str, Any] = {
        "file": str(image_path),
        "analysis": result.analysis.textual_analysis,
        "styleStrength": result.style_strength,
        "influence": [s.model_dump() for s in result.influence],
    }
    with open(image_path.with_suffix(".json"), "w", encoding="utf-8") as f:
        json.dump(meta, f, ensure_ascii=False, indent=2)
    return meta


def _format_errors(error: Dict[str, List[str]]) -> str:
    return "\n".join(f"{field}: {msg}" for field, messages in error.items() for msg in messages)


def cli_main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate abstract art from a text prompt.")
    parser.add_argument("--prompt", type=str, help="Art prompt (or read from stdin)")
    parser.add_argument("--style-reference", type=str, help="Path to a reference image guiding the style")
    parser.add_argument("--movement", type=str, help="Artistic movement, e.g. Cubism")
    parser.add_argument("--mood", type=str, help="Color mood, e.g. Vibrant")
    parser.add_argument("--strength", type=float, help="Style strength 0-100 (with --style-reference)")
    parser.add_argument("--out", type=str, help="Output image path; metadata goes next to it as .json")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL)

    prompt = _read_prompt(args.prompt)
    result = asyncio.run(ArtStudio().generate(build_raw_request(args, prompt)))

    if not isinstance(result, ArtGenerationSuccess):
        print(_format_errors(result.error), file=sys.stderr)
        raise SystemExit(1)

    if args.out:
        meta = save_art(result, Path(args.out))
        print(f"Wrote art + metadata to: {meta['file']}")
    else:
        print(json.dumps(result.model_dump(by_alias=True), ensure_ascii=False))


if __name__ == "__main__":
    cli_main()
