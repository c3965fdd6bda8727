#!/usr/bin/env python3
from __future__ import annotations

import sys

from pwmeter.cli.check_cli import main as check_main
from pwmeter.cli.pwgen_cli import main as generate_main
from pwmeter.core.password_tables import PASSWORD_TIPS

_CHECK_ALIASES = frozenset({"check", "analyze", "strength"})
_GENERATE_ALIASES = frozenset({"generate", "gen", "password", "pw"})
_TIPS_ALIASES = frozenset({"tips", "tip"})


def _print_help() -> None:
    print(
        "PwMeter unified CLI\n"
        "\n"
        "Usage:\n"
        "  pwmeter [generate flags]\n"
        "  pwmeter generate [generate flags]\n"
        "  pwmeter check [password] [--stdin] [--json]\n"
        "  pwmeter tips\n"
        "\n"
        "Examples:\n"
        "  pwmeter -n 5 -l 24 --show-meta\n"
        "  pwmeter check --stdin --json < secret.txt\n"
    )


def _print_tips() -> int:
    for tip in PASSWORD_TIPS:
        print(f"- {tip}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return generate_main([])

    command = args[0].lower()
    tail = args[1:]

    if command in ("-h", "--help", "help"):
        _print_help()
        return 0
    if command in _CHECK_ALIASES:
        return check_main(tail)
    if command in _GENERATE_ALIASES:
        return generate_main(tail)
    if command in _TIPS_ALIASES:
        return _print_tips()
    if command.startswith("-"):
        return generate_main(args)
    print(
        f"unknown command: {args[0]!r}. Use 'pwmeter --help' for usage.",
        file=sys.stderr,
    )
    return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
