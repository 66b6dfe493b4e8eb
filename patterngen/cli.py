"""Command line entry point for the pattern generator."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv


def _load_env_file(path: str | None = None) -> None:
    """Load environment variables using python-dotenv and apply defaults."""

    env_path = path or os.path.join(os.path.dirname(__file__), "..", ".env")
    load_dotenv(dotenv_path=env_path)

    os.environ.setdefault("PATTERNGEN_FAIL_FAST", "1")
    os.environ.setdefault("PATTERNGEN_CANVAS", "400x225")


_load_env_file()

_LOGGER = logging.getLogger("patterngen.cli")

from patterngen.agents.critic import CriticAgent
from patterngen.agents.generator import GeneratorAgent
from patterngen.core import (
    InvalidSeedError,
    PathTraversalError,
    generate_slug,
    generate_unique_slug,
    normalize_output_path,
)
from patterngen.generator.assembler import generate_pattern
from patterngen.generator.badges import get_gradient, get_icon
from patterngen.generator.mood import classify_mood
from patterngen.lifecycle import run_batch
from patterngen.logging import log_pattern_event
from patterngen.render.svg import render_svg, write_svg

_OUTPUT_DIR_ENV = "PATTERNGEN_OUTPUT_DIR"
_DEFAULT_OUTPUT_DIR = os.path.join("meta", "output", "patterngen", "renders")
_PROPOSALS_DIR = os.path.join("meta", "output", "patterngen", "proposals")


def _configure_logging() -> None:
    log_level = os.getenv("PATTERNGEN_LOG_LEVEL", "INFO")
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _parse_canvas(value: str) -> Tuple[int, int]:
    try:
        width_raw, height_raw = value.lower().split("x", 1)
        width, height = int(width_raw), int(height_raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"canvas must look like WIDTHxHEIGHT, got {value!r}") from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("canvas dimensions must be positive")
    return width, height


def _load_proposal(value: str) -> Dict[str, Any]:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        with open(value, "r", encoding="utf-8") as handle:
            return json.load(handle)


def _output_dir() -> str:
    return os.getenv(_OUTPUT_DIR_ENV, _DEFAULT_OUTPUT_DIR)


def _persist_proposal(proposal: Dict[str, Any]) -> str:
    if "proposal_id" not in proposal:
        raise ValueError("proposal must include a 'proposal_id'")

    os.makedirs(_PROPOSALS_DIR, exist_ok=True)
    path = os.path.join(_PROPOSALS_DIR, f"{proposal['proposal_id']}.json")
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(proposal, handle, sort_keys=True, indent=2)
        handle.write("\n")
    return path


def _relativize(path: str) -> str:
    try:
        return os.path.relpath(path, start=os.getcwd())
    except ValueError:
        return path


def _add_tag_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Category tag (repeatable, order preserved)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic placeholder pattern generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Propose and review a pattern for a seed")
    generate_parser.add_argument("seed", help="Project slug or other stable identifier")
    _add_tag_argument(generate_parser)
    generate_parser.add_argument("--persist", action="store_true", help="Write passing proposals to disk")
    strict_group = generate_parser.add_mutually_exclusive_group()
    strict_group.add_argument("--strict", dest="strict", action="store_true", help="Fail on invariant violations")
    strict_group.add_argument("--relaxed", dest="strict", action="store_false", help="Downgrade invariant violations to warnings")
    generate_parser.set_defaults(strict=None)

    render_parser = subparsers.add_parser("render", help="Render a seed's pattern as SVG")
    render_parser.add_argument("seed", help="Project slug or other stable identifier")
    _add_tag_argument(render_parser)
    render_parser.add_argument("--out", help="Output file; '-' prints to stdout (default: output dir)")
    render_parser.add_argument(
        "--canvas",
        type=_parse_canvas,
        default=None,
        help="Canvas size as WIDTHxHEIGHT (default: PATTERNGEN_CANVAS or 400x225)",
    )

    critique_parser = subparsers.add_parser("critique", help="Review a proposal JSON payload")
    critique_parser.add_argument("proposal", help="JSON string or file path pointing to the proposal")

    mood_parser = subparsers.add_parser("mood", help="Classify tags into a mood")
    mood_parser.add_argument("tags", nargs="*", help="Category tags")

    badge_parser = subparsers.add_parser("badge", help="Show the card gradient and icon for a project")
    badge_parser.add_argument("seed", help="Project slug")
    _add_tag_argument(badge_parser)

    batch_parser = subparsers.add_parser("batch", help="Generate, review and render patterns for many projects")
    batch_parser.add_argument("manifest", help="JSONL file of {\"seed\": ..., \"tags\": [...]} entries")
    batch_parser.add_argument("--render-dir", default=None, help="Render passing patterns here (default: output dir)")
    batch_parser.add_argument("--no-render", action="store_true", help="Review only, skip SVG output")

    slug_parser = subparsers.add_parser("slug", help="Derive a seed slug from a project title")
    slug_parser.add_argument("title", help="Project title")
    slug_parser.add_argument("--unique", action="store_true", help="Append a random suffix")

    return parser


def _run_generate(args: argparse.Namespace) -> int:
    if args.strict is not None:
        os.environ["PATTERNGEN_FAIL_FAST"] = "1" if args.strict else "0"

    generator = GeneratorAgent()
    proposal = generator.propose(args.seed, args.tags)

    critic = CriticAgent()
    review = critic.review(proposal)

    proposal_path: Optional[str] = None
    if review["ok"]:
        _LOGGER.info("Review passed in %s mode", review["mode"])
        if args.persist:
            proposal_path = _relativize(_persist_proposal(proposal))
    else:
        _LOGGER.error("Review failed in %s mode; proposal not persisted", review["mode"])

    print(json.dumps({"proposal": proposal, "review": review, "proposal_path": proposal_path}, indent=2))
    return 0 if review["ok"] else 1


def _run_render(args: argparse.Namespace) -> int:
    width, height = args.canvas or _parse_canvas(os.getenv("PATTERNGEN_CANVAS", "400x225"))
    pattern = generate_pattern(args.seed, args.tags)

    if args.out == "-":
        print(render_svg(pattern, seed=args.seed, width=width, height=height))
        log_pattern_event("render", {"seed": args.seed, "tags": args.tags, "target": "stdout", "canvas": [width, height]})
        return 0

    target = args.out or os.path.join(_output_dir(), f"{generate_slug(args.seed) or 'pattern'}.svg")
    path = normalize_output_path(target)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    write_svg(pattern, path, seed=args.seed, width=width, height=height)
    _LOGGER.info("Rendered %s (%d shapes)", _relativize(path), len(pattern.shapes))
    log_pattern_event(
        "render",
        {"seed": args.seed, "tags": args.tags, "target": _relativize(path), "canvas": [width, height]},
    )
    print(_relativize(path))
    return 0


def _load_manifest(path: str) -> List[Tuple[str, List[str]]]:
    entries: List[Tuple[str, List[str]]] = []
    with open(path, "r", encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            record = json.loads(line)
            if not isinstance(record, dict) or "seed" not in record:
                raise ValueError(f"{path}:{number}: entry must be an object with a 'seed'")
            seed = record["seed"]
            if not isinstance(seed, str) or not seed:
                raise ValueError(f"{path}:{number}: 'seed' must be a non-empty string")
            tags = record.get("tags", [])
            if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
                raise ValueError(f"{path}:{number}: 'tags' must be a list of strings")
            entries.append((seed, tags))
    return entries


def _run_batch(args: argparse.Namespace) -> int:
    entries = _load_manifest(args.manifest)
    render_dir = None if args.no_render else normalize_output_path(args.render_dir or _output_dir())
    results = run_batch(entries, render_dir=render_dir)

    rows = [
        {
            "seed": result["proposal"]["seed"],
            "mood": result["proposal"]["mood"],
            "validation_status": result["review"]["validation_status"],
            "render_path": _relativize(result["render_path"]) if result["render_path"] else None,
        }
        for result in results
    ]
    print(json.dumps(rows, indent=2))
    return 0 if all(result["review"]["ok"] for result in results) else 1


def _run_critique(args: argparse.Namespace) -> int:
    proposal = _load_proposal(args.proposal)
    critic = CriticAgent()
    review = critic.review(proposal)
    print(json.dumps(review, indent=2))

    if review["ok"]:
        if review["validation_status"] == "warned":
            _LOGGER.warning("Critique completed in relaxed mode with %d issue(s)", len(review["issues"]))
        return 0

    _LOGGER.error("Critique failed: %s", "; ".join(review["issues"][:3]))
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the pattern generator CLI."""

    _configure_logging()
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "generate":
            return _run_generate(args)
        if args.command == "render":
            return _run_render(args)
        if args.command == "critique":
            return _run_critique(args)
        if args.command == "batch":
            return _run_batch(args)
    except InvalidSeedError as exc:
        _LOGGER.error("Invalid seed: %s", exc)
        return 1
    except PathTraversalError as exc:
        _LOGGER.error("Refusing output path: %s", exc)
        return 1
    except (OSError, ValueError, argparse.ArgumentTypeError) as exc:
        _LOGGER.error("%s failed: %s", args.command, exc)
        return 1

    if args.command == "mood":
        print(classify_mood(args.tags).value)
        return 0

    if args.command == "badge":
        print(json.dumps({"gradient": get_gradient(args.seed), "icon": get_icon(args.tags)}, indent=2))
        return 0

    if args.command == "slug":
        slug = generate_unique_slug(args.title) if args.unique else generate_slug(args.title)
        log_pattern_event("slug", {"title": args.title, "slug": slug, "unique": args.unique})
        print(slug)
        return 0

    parser.error("Unknown command")
    return 1


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
