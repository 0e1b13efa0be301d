# src/main.py — v1
"""CLI entry point: generate, style init, character init, version.

Usage:
    warhol generate --style <path-or-name> [--character <name>|-<name>]
                    --prompt <text> [--provider google|openai] [--model <id>]
                    [--size WxH] [--quality q] [--out-dir <dir>] [--dry-run]
    warhol style init <name> [--output <path>]
    warhol character init <name> [--output <path>]
    warhol version
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from warhol.version import __version__

if TYPE_CHECKING:
    from warhol.config.settings import Settings

logger = logging.getLogger(__name__)

# Flags accepted by `generate`; any other single-dash token is a character.
_GENERATE_FLAGS = {
    "style", "character", "prompt", "out-dir", "provider", "model",
    "size", "quality", "dry-run", "h", "help",
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(normalize_generate_args(argv))

    from warhol.config.settings import ConfigurationError, load_settings

    try:
        settings = load_settings()
        _setup_logging(settings, args.verbose)
    except (ConfigurationError, ValueError) as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 1

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    from warhol.core.errors import UnsupportedProviderError, WarholError

    try:
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except UnsupportedProviderError as exc:
        print(f"invalid model/provider: {exc}", file=sys.stderr)
        return 2
    except (WarholError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        logger.debug("Failure detail", exc_info=True)
        return 1


def normalize_generate_args(argv: list[str]) -> list[str]:
    """Rewrite a bare `-<name>` after `generate` into `--character <name>`.

    Known short/long flags, `--` options, `-` alone and tokens containing
    '=' pass through unchanged.
    """
    if "generate" not in argv:
        return argv
    idx = argv.index("generate") + 1
    head, tail = argv[:idx], argv[idx:]

    normalized: list[str] = []
    for arg in tail:
        if arg.startswith("--") or not arg.startswith("-") or arg == "-":
            normalized.append(arg)
            continue
        trimmed = arg[1:]
        if trimmed.split("=", 1)[0] in _GENERATE_FLAGS or "=" in trimmed:
            normalized.append(arg)
            continue
        normalized.extend(["--character", trimmed])
    return head + normalized


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="warhol",
        description="warhol - CLI for creating images in a consistent visual style",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- generate ---
    p_gen = subparsers.add_parser(
        "generate", help="Compose a prompt and generate an image",
    )
    p_gen.add_argument("-style", "--style", required=True,
                       help="Style profile path or name")
    p_gen.add_argument("-character", "--character", default=None,
                       help="Character profile path or name (or -<name>)")
    p_gen.add_argument("-prompt", "--prompt", required=True, help="Prompt text")
    p_gen.add_argument("-provider", "--provider", default=None,
                       help="Image provider: google or openai (default: google)")
    p_gen.add_argument("-model", "--model", default=None,
                       help="Model override (defaults by provider)")
    p_gen.add_argument("-size", "--size", default=None,
                       help="OpenAI image size (default: 1024x1024)")
    p_gen.add_argument("-quality", "--quality", default=None,
                       help="OpenAI image quality: low, medium, high (default: medium)")
    p_gen.add_argument("-out-dir", "--out-dir", dest="out_dir", type=Path, default=None,
                       help="Directory for generated artifacts (default: outputs)")
    p_gen.add_argument("-dry-run", "--dry-run", dest="dry_run", action="store_true",
                       help="Compose prompt and write the manifest without generating")
    p_gen.set_defaults(func=_cmd_generate)

    # --- style / character init ---
    for kind, label in (("styles", "style"), ("characters", "character")):
        p_kind = subparsers.add_parser(label, help=f"Manage {label} profiles")
        kind_sub = p_kind.add_subparsers(dest=f"{label}_command", required=True)
        p_init = kind_sub.add_parser("init", help=f"Create a {label} profile template")
        p_init.add_argument("name", help=f"{label.capitalize()} name")
        p_init.add_argument("-o", "--output", type=Path, default=None,
                            help=f"Path to output YAML file (default: {kind}/<name>.yaml)")
        p_init.set_defaults(func=_cmd_init, kind=kind, label=label)

    # --- version ---
    p_version = subparsers.add_parser("version", help="Print the version")
    p_version.set_defaults(func=_cmd_version)

    return parser


def _cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    """Run one generation and print where the outputs went."""
    from warhol.generation.models import GenerationRequest
    from warhol.generation.orchestrator import GenerationOrchestrator
    from warhol.storage.layout import default_project_path

    output_dir = args.out_dir or default_project_path(str(settings.output_dir))
    request = GenerationRequest(
        style=args.style,
        character=args.character,
        prompt=args.prompt,
        provider=args.provider,
        model=args.model,
        size=args.size,
        quality=args.quality,
        output_dir=output_dir,
        dry_run=args.dry_run,
    )
    result = GenerationOrchestrator(settings).run(request)

    print(f"Prompt: {result.final_prompt}")
    if result.image_path is None:
        print("Dry run: image generation skipped.")
    else:
        print(f"Image saved: {result.image_path}")
    print(f"Manifest saved: {result.manifest_path}")
    return 0


def _cmd_init(args: argparse.Namespace, settings: Settings) -> int:
    """Write a new style or character template."""
    from warhol.profiles.templates import write_template
    from warhol.storage.layout import default_project_path

    path = args.output or default_project_path(args.kind) / f"{args.name}.yaml"
    written = write_template(args.kind, args.name, path)
    print(f"Created {args.label} template: {written}")
    return 0


def _cmd_version(args: argparse.Namespace, settings: Settings) -> int:
    print(__version__)
    return 0


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage from settings and -v."""
    from warhol.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file or None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
