#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys

from pwmeter.core.error_dialect import error_payload, format_error_text
from pwmeter.core.models import GENERATOR_DEFAULT_COUNT, GENERATOR_DEFAULT_LENGTH, PasswordRequest
from pwmeter.core.password_service import generate_passwords


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Random password generator covering every selected character type")

    parser.add_argument("-l", "--length", type=int, default=GENERATOR_DEFAULT_LENGTH, help="password length")
    parser.add_argument("-n", "--count", type=int, default=GENERATOR_DEFAULT_COUNT, help="number of outputs to print")

    # Character classes (all enabled by default)
    parser.add_argument("--no-lowercase", action="store_true", help="exclude lowercase letters")
    parser.add_argument("--no-uppercase", action="store_true", help="exclude uppercase letters")
    parser.add_argument("--no-digits", action="store_true", help="exclude digits")
    parser.add_argument("--no-symbols", action="store_true", help="exclude symbols")

    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print score, strength, entropy and crack-time estimate per output.",
    )
    parser.add_argument("--json", action="store_true", help="print outputs (and analyses) as a JSON object")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    request = PasswordRequest(
        count=args.count,
        length=args.length,
        use_lowercase=not args.no_lowercase,
        use_uppercase=not args.no_uppercase,
        use_digits=not args.no_digits,
        use_symbols=not args.no_symbols,
        show_meta=args.show_meta,
    )
    try:
        result = generate_passwords(request)
    except ValueError as exc:
        if args.json:
            print(json.dumps(error_payload(exc)), file=sys.stderr)
        else:
            print(format_error_text(exc), file=sys.stderr)
        return 2

    if args.json:
        payload: dict[str, object] = {"outputs": list(result.outputs)}
        if args.show_meta:
            payload["analyses"] = [analysis.as_dict() for analysis in result.analyses]
        print(json.dumps(payload, ensure_ascii=True))
        return 0
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
