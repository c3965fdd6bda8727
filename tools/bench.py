from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Allow running as `python tools/bench.py` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pwmeter.core.models import PasswordRequest
from pwmeter.core.password_analyzer import analyze
from pwmeter.core.password_service import generate_passwords


def _bench_generate(count: int, length: int) -> list[str]:
    req = PasswordRequest(count=count, length=length)
    t0 = time.perf_counter()
    result = generate_passwords(req)
    dt = time.perf_counter() - t0
    rate = (len(result.outputs) / dt) if dt > 0 else 0.0
    print(f"[generate] count={len(result.outputs)} length={length} seconds={dt:.4f} rate={rate:.1f}/s")
    return list(result.outputs)


def _bench_analyze(passwords: list[str]) -> None:
    t0 = time.perf_counter()
    for value in passwords:
        analyze(value)
    dt = time.perf_counter() - t0
    rate = (len(passwords) / dt) if dt > 0 else 0.0
    print(f"[analyze] count={len(passwords)} seconds={dt:.4f} rate={rate:.1f}/s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="PwMeter baseline benchmark (stdlib-only).")
    parser.add_argument("--passwords", type=int, default=0, help="Number of passwords to generate.")
    parser.add_argument("--length", type=int, default=16, help="Password length.")
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Also time analysis of every generated password.",
    )
    args = parser.parse_args(argv)

    if args.passwords <= 0:
        parser.error("Set --passwords to a value > 0")

    generated = _bench_generate(count=args.passwords, length=args.length)
    if args.analyze:
        _bench_analyze(generated)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
