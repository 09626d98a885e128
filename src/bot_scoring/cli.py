"""Command-line profile scoring.

Reads a scraped profile as JSON and prints its bot-likelihood analysis.

Usage:
    # Score a profile file
    bot-score profile.json

    # Score from stdin, rendered as a table
    cat profile.json | bot-score --format table

    # Pin the reference time for reproducible account ages
    bot-score profile.json --now 2025-01-01

The request body of the scraping extension, ``{"message": {...profile...}}``,
is accepted as well as a bare profile object.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bot_utils import get_logger
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from bot_scoring.errors import ErrorCode, ProfileInputError
from bot_scoring.heuristic import analyze, parse_account_date

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bot_scoring.heuristic import AnalysisResult

log = get_logger("bot_scoring.cli")

ENVELOPE_KEY = "message"


def build_parser() -> argparse.ArgumentParser:
    """Build the ``bot-score`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="bot-score",
        description="Estimate how likely a scraped social-media profile is a bot.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Profile JSON file (reads stdin when omitted or '-')",
    )
    parser.add_argument(
        "--now",
        type=_parse_now,
        default=None,
        help="Reference time for account age, ISO-8601 (default: current time)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format (default: json)",
    )
    return parser


def _parse_now(value: str) -> datetime:
    parsed = parse_account_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 date: {value!r}")
    return parsed


def read_input(path: str | None) -> str:
    """Read the raw payload from a file or stdin."""
    if path is None or path == "-":
        return sys.stdin.read()

    source = Path(path)
    if not source.is_file():
        raise ProfileInputError.input_not_found(path)
    return source.read_text(encoding="utf-8")


def load_payload(raw: str) -> dict[str, Any]:
    """Decode a profile payload, unwrapping the ``message`` envelope.

    Raises:
        ProfileInputError: If the text is not JSON or not a JSON object.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ProfileInputError.invalid_json(str(e)) from e

    if isinstance(payload, dict) and isinstance(payload.get(ENVELOPE_KEY), dict):
        payload = payload[ENVELOPE_KEY]

    if not isinstance(payload, dict):
        raise ProfileInputError.invalid_profile(f"expected a JSON object, got {type(payload).__name__}")

    return payload


def render_table(result: AnalysisResult, console: Console) -> None:
    """Print the analysis as a rich table."""
    table = Table(
        title=f"Bot likelihood: {result.bot_likelihood}/100",
        box=box.ROUNDED,
        show_lines=True,
    )
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Explanation")

    for name, category in result.analysis:
        style = "red" if category.score >= 70 else "yellow" if category.score >= 50 else "green"
        table.add_row(name, f"[{style}]{category.score}[/{style}]", category.description)

    console.print(table)
    if result.override_triggered:
        console.print(f"[bold red]Override:[/bold red] {result.override_explanation}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        payload = load_payload(read_input(args.path))
        log.info("profile_received", fields=sorted(payload))

        result = analyze(payload, now=args.now)
    except ProfileInputError as e:
        if e.is_code(ErrorCode.INPUT_NOT_FOUND):
            log.warning("input_missing", path=args.path)
        else:
            log.error("profile_rejected", code=e.code, error=e.message)
        print(json.dumps({"error": e.message}), file=sys.stderr)
        return 1
    except ValidationError as e:
        log.error("analysis_failed", errors=e.error_count())
        print(json.dumps({"error": f"Invalid profile: {e.error_count()} invalid field(s)"}), file=sys.stderr)
        return 1
    except Exception as e:
        log.error("analysis_failed", error=str(e))
        print(json.dumps({"error": "Analysis failed"}), file=sys.stderr)
        return 1

    log.info(
        "analysis_complete",
        bot_likelihood=result.bot_likelihood,
        override=result.override_triggered,
    )

    if args.format == "table":
        render_table(result, Console())
    else:
        print(json.dumps(result.to_payload(), indent=2))

    return 0
