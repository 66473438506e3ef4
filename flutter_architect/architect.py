"""Flutter Architect run orchestrator and CLI.

Validates a project descriptor, optionally creates the base project with
``flutter create``, then scaffolds the clean-architecture tree on top of it.

Usage::

    python -m flutter_architect.architect --name shop --features auth,products,settings \\
        --nav bottom_nav --tabs auth,products
    python -m flutter_architect.architect --descriptor shop.json --create-project --org com.example
"""

from __future__ import annotations

import asyncio
import json
import sys
import time
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape
from rich.panel import Panel

from flutter_architect.config import ArchitectConfig
from flutter_architect.flutter_ops import FlutterCommand, run_flutter
from flutter_architect.scaffolder import (
    NavigationType,
    ProjectGenerator,
    ScaffoldError,
    ScaffoldResult,
    parse_descriptor,
)
from flutter_architect.utils import (
    console,
    format_duration,
    load_json,
    print_error,
    print_success,
    print_summary_table,
)


async def run_architect(
    raw_descriptor: dict[str, Any],
    config: ArchitectConfig,
    org: Optional[str] = None,
) -> ScaffoldResult:
    """Validate, optionally ``flutter create``, then scaffold.

    Every failure is returned as an ``error`` result; nothing is raised for
    invalid input, toolchain errors or filesystem errors.
    """
    try:
        descriptor = parse_descriptor(raw_descriptor)
    except ScaffoldError as exc:
        return ScaffoldResult.failure(str(exc))

    features = ", ".join(descriptor.features) or "(none)"
    console.print(
        Panel(
            f"[bold bright_cyan]Flutter Architect[/bold bright_cyan]\n"
            f"Project    : {descriptor.project_name}\n"
            f"Output     : {config.output_dir.resolve()}\n"
            f"Navigation : {descriptor.navigation_type.value}\n"
            f"Features   : {escape(features)}",
            title="[bold]Scaffold[/bold]",
            border_style="bright_cyan",
        )
    )

    if config.create_project:
        try:
            config.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return ScaffoldResult.failure(
                f"Cannot create output directory {config.output_dir}: {exc}"
            )
        tool = await run_flutter(
            FlutterCommand(project_name=descriptor.project_name, org=org),
            cwd=config.output_dir,
            config=config,
        )
        if not tool.ok:
            return ScaffoldResult.failure(f"flutter create failed: {tool.message}")
        console.print("  [green]+[/green] Base Flutter project created")

    return await ProjectGenerator(descriptor, config).generate()


def _split_list(value: Optional[str]) -> Optional[list[str]]:
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


def _descriptor_from_args(args: Any) -> dict[str, Any]:
    """Build raw descriptor data from ``--descriptor`` and/or the flags.

    Flags override values read from the descriptor file.
    """
    raw: dict[str, Any] = load_json(args.descriptor) if args.descriptor else {}
    if args.name is not None:
        raw["project_name"] = args.name
    features = _split_list(args.features)
    if features is not None:
        raw["features"] = features
    if args.nav is not None:
        raw["navigation_type"] = args.nav
    tabs = _split_list(args.tabs)
    if tabs is not None:
        raw["tab_features"] = tabs
    return raw


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m flutter_architect.architect``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Flutter Architect -- clean-architecture project scaffolder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m flutter_architect.architect --name shop --features auth,cart --nav simple\n"
            "  python -m flutter_architect.architect --descriptor shop.json -o ./apps --create-project\n"
        ),
    )
    parser.add_argument("--descriptor", "-d", default=None, help="Path to a JSON project descriptor")
    parser.add_argument("--name", default=None, help="Project name (Dart package name)")
    parser.add_argument("--features", default=None, help="Comma-separated feature names")
    parser.add_argument(
        "--nav",
        choices=[n.value for n in NavigationType],
        default=None,
        help="Navigation style",
    )
    parser.add_argument("--tabs", default=None, help="Comma-separated tab features (bottom_nav)")
    parser.add_argument("--output", "-o", default=None, help="Output directory (default: FA_OUTPUT_DIR or .)")
    parser.add_argument("--org", default=None, help="Organization domain for 'flutter create'")
    parser.add_argument(
        "--create-project",
        action="store_true",
        help="Run 'flutter create' before scaffolding",
    )
    parser.add_argument(
        "--cleanup-on-failure",
        action="store_true",
        help="Remove files written by a failed run",
    )

    args = parser.parse_args(argv)

    try:
        raw = _descriptor_from_args(args)
    except (OSError, json.JSONDecodeError) as exc:
        console.print(f"[bold red]Error:[/bold red] Cannot read descriptor: {escape(str(exc))}")
        sys.exit(1)

    config = ArchitectConfig.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.create_project:
        config.create_project = True
    if args.cleanup_on_failure:
        config.cleanup_on_failure = True

    start = time.monotonic()
    result = asyncio.run(run_architect(raw, config, org=args.org))
    elapsed = time.monotonic() - start

    if result.ok:
        print_summary_table(
            {
                "Project": result.project_path or "",
                "Files written": str(len(result.files_written)),
                "Duration": format_duration(elapsed),
            },
            title="Scaffold",
        )
        print_success(escape(result.message))
        console.print(
            "[dim]Add the dependencies: flutter_riverpod, riverpod_annotation, go_router "
            "(dev: build_runner, riverpod_generator)[/dim]"
        )
    else:
        print_error(f"Scaffold failed: {escape(result.message)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
