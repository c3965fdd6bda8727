#!/usr/bin/env python3
from __future__ import annotations

import argparse
import getpass
import json
import sys
from typing import TextIO

from pwmeter.core.error_dialect import INPUT_ERROR, PwMeterError, format_error_text
from pwmeter.core.models import PasswordAnalysis
from pwmeter.core.password_analyzer import analyze
from pwmeter.core.password_entropy import round_half_up

REQUIREMENT_LABELS: tuple[tuple[str, str], ...] = (
    ("has_min_length", "At least 8 characters"),
    ("has_uppercase", "Uppercase letter"),
    ("has_lowercase", "Lowercase letter"),
    ("has_digit", "Number"),
    ("has_symbol", "Special character"),
    ("is_not_common", "Not a common password"),
)

PATTERN_LABELS: dict[str, str] = {
    "is_common": "matches a common password",
    "has_repeats": "repeats a character 3+ times in a row",
    "has_sequence": "contains an alphabetic or numeric sequence",
    "has_keyboard_pattern": "contains a keyboard pattern",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate the strength of a password")
    parser.add_argument(
        "password",
        nargs="?",
        default=None,
        help="password to analyze (omit to be prompted without echo)",
    )
    parser.add_argument("--stdin", action="store_true", help="read the password from the first line of stdin")
    parser.add_argument("--json", action="store_true", help="print the analysis as a JSON object")
    return parser.parse_args(argv)


def read_password(args: argparse.Namespace, stdin: TextIO | None = None) -> str:
    if args.password is not None and args.stdin:
        raise ValueError("pass the password as an argument or with --stdin, not both")
    if args.password is not None:
        return args.password
    if args.stdin:
        line = (stdin or sys.stdin).readline()
        return line.rstrip("\r\n")
    try:
        return getpass.getpass("Password: ")
    except EOFError as exc:
        raise PwMeterError("no password entered", INPUT_ERROR) from exc


def format_report(analysis: PasswordAnalysis) -> list[str]:
    band = analysis.strength_level
    lines = [
        f"Strength:   {band.label} ({analysis.score}%)",
        f"            {band.description}",
        f"Length:     {analysis.length}",
        f"Entropy:    {round_half_up(analysis.entropy_bits)} bits",
        f"Crack time: {analysis.crack_time_estimate}",
        f"Requirements ({analysis.requirements.met_count()}/{len(REQUIREMENT_LABELS)} met):",
    ]
    for name, label in REQUIREMENT_LABELS:
        mark = "✓" if getattr(analysis.requirements, name) else "✗"
        lines.append(f"  {mark} {label}")
    fired = analysis.patterns.fired()
    if fired:
        lines.append("Penalties:")
        for name in fired:
            lines.append(f"  - {PATTERN_LABELS[name]}")
    return lines


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        password = read_password(args)
    except (OSError, ValueError) as exc:
        print(format_error_text(exc, default_code=INPUT_ERROR), file=sys.stderr)
        return 2

    analysis = analyze(password)
    if args.json:
        print(json.dumps(analysis.as_dict(), ensure_ascii=True))
        return 0
    for line in format_report(analysis):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
