"""CLI interface for the tri-state algebra.

Provides command-line access to a few worked examples:
- demo: Walk through construction, recovery, combination and aggregation
- sequence: Parse integers and aggregate them with parallel_sequence
"""

from __future__ import annotations

import argparse
import json
import logging
import operator
import sys
from typing import Any

from src.tristate.combinators import parallel_sequence
from src.tristate.effects import effect
from src.tristate.snapshot import to_snapshot
from src.tristate.state import TriState, idle

SAMPLE_INPUTS = ["42", "17", "forty-two"]

PENDING_TOKEN = "?"


def render(state: TriState[Any]) -> str:
    """Describe a state the way a screen would show it."""
    return state.fold(
        on_content=lambda data: f"content: {data!r}",
        on_error=lambda message: f"error: {message}",
        on_idle=lambda: "idle: nothing to show yet",
    )


def parse_value(raw: str, pending: str = PENDING_TOKEN) -> TriState[int]:
    """Parse ``raw`` as an integer, treating the pending token as Idle."""
    if raw == pending:
        return idle()
    return effect(lambda: int(raw))


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tri-state results - Idle, Error and Content with combinators"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("demo", help="Run a walkthrough with sample inputs")

    sequence_parser = subparsers.add_parser(
        "sequence", help="Parse integers and aggregate the outcomes"
    )
    sequence_parser.add_argument("values", nargs="+", help="Values to parse")
    sequence_parser.add_argument(
        "--pending",
        default=PENDING_TOKEN,
        help="Token that marks a value as not available yet",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if args.command == "demo":
        run_demo()
    elif args.command == "sequence":
        run_sequence(args.values, args.pending)
    else:
        parser.print_help()
        sys.exit(1)


def run_demo() -> None:
    """Run a complete walkthrough with sample data."""
    print("=" * 60)
    print("Tri-State Results - Demo")
    print("=" * 60)
    print()

    print(f"[1/4] Parsing {len(SAMPLE_INPUTS)} sample inputs...")
    parsed = [parse_value(raw) for raw in SAMPLE_INPUTS]
    pending = idle()
    for raw, state in zip(SAMPLE_INPUTS, parsed):
        print(f"      {raw!r:<12} -> {render(state)}")
    print(f"      {'(pending)':<12} -> {render(pending)}")
    print()

    print("[2/4] Recovering with a default of 0:")
    print(f"      failed  -> {render(parsed[2].recover(lambda _message: 0))}")
    print(f"      pending -> {render(pending.recover(lambda _message: 0))}")
    print()

    print("[3/4] Combining:")
    print(f"      42 + 17          -> {render(parsed[0].combine(parsed[1], operator.add))}")
    print(f"      zip(42, 17)      -> {render(parsed[0].zip(parsed[1]))}")
    print(f"      zip(42, bad)     -> {render(parsed[0].zip(parsed[2]))}")
    print(f"      zip(pending, 42) -> {render(pending.zip(parsed[0]))}")
    print()

    aggregates = {
        "all_ok": parallel_sequence(parsed[:2]),
        "with_error": parallel_sequence(parsed),
        "with_pending": parallel_sequence([parsed[0], pending]),
    }
    print("[4/4] Aggregating:")
    for name, state in aggregates.items():
        print(f"      {name:<12} -> {render(state)}")
    print()
    print("=" * 60)

    json_output = {
        name: to_snapshot(state).model_dump(mode="json")
        for name, state in aggregates.items()
    }
    print("JSON output:")
    print(json.dumps(json_output, indent=2))


def run_sequence(values: list[str], pending: str = PENDING_TOKEN) -> None:
    """Parse every value and print the aggregate as JSON."""
    result = parallel_sequence(parse_value(raw, pending) for raw in values)

    print(json.dumps(to_snapshot(result).model_dump(mode="json"), indent=2))
    if result.is_error():
        sys.exit(1)


if __name__ == "__main__":
    main()
