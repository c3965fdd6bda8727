from __future__ import annotations

from dataclasses import asdict, dataclass, field
import math
from typing import Any, Tuple

from pwmeter.core.password_tables import STRENGTH_BANDS, StrengthBand


GENERATOR_DEFAULT_LENGTH = 16
GENERATOR_DEFAULT_COUNT = 1


@dataclass(frozen=True)
class Requirements:
    has_min_length: bool = False
    has_uppercase: bool = False
    has_lowercase: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    is_not_common: bool = True

    def met_count(self) -> int:
        return sum(1 for value in asdict(self).values() if value)


@dataclass(frozen=True)
class PatternFlags:
    is_common: bool = False
    has_repeats: bool = False
    has_sequence: bool = False
    has_keyboard_pattern: bool = False

    def fired(self) -> Tuple[str, ...]:
        return tuple(name for name, value in asdict(self).items() if value)


@dataclass(frozen=True)
class PasswordAnalysis:
    score: int = 0
    strength_level: StrengthBand = STRENGTH_BANDS[0]
    entropy_bits: float = 0.0
    crack_time_estimate: str = "instant"
    requirements: Requirements = field(default_factory=Requirements)
    length: int = 0
    patterns: PatternFlags = field(default_factory=PatternFlags)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    def meta_text(self) -> str:
        return (
            f"[score={self.score} strength={self.strength_level.label!r} "
            f"entropy={format_entropy_bits(self.entropy_bits)} bits crack={self.crack_time_estimate!r}]"
        )


def format_entropy_bits(entropy_bits: float) -> str:
    if not math.isfinite(entropy_bits):
        return "unknown"
    rounded = round(entropy_bits, 3)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.3f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class GeneratorConfig:
    length: int = GENERATOR_DEFAULT_LENGTH
    use_lowercase: bool = True
    use_uppercase: bool = True
    use_digits: bool = True
    use_symbols: bool = True

    def enabled_flags(self) -> Tuple[bool, ...]:
        # Same order as password_tables.CHARACTER_CLASSES.
        return (self.use_lowercase, self.use_uppercase, self.use_digits, self.use_symbols)


@dataclass(frozen=True)
class PasswordRequest:
    count: int = GENERATOR_DEFAULT_COUNT
    length: int = GENERATOR_DEFAULT_LENGTH
    use_lowercase: bool = True
    use_uppercase: bool = True
    use_digits: bool = True
    use_symbols: bool = True
    show_meta: bool = False

    def generator_config(self) -> GeneratorConfig:
        return GeneratorConfig(
            length=self.length,
            use_lowercase=self.use_lowercase,
            use_uppercase=self.use_uppercase,
            use_digits=self.use_digits,
            use_symbols=self.use_symbols,
        )


@dataclass(frozen=True)
class PasswordResult:
    outputs: Tuple[str, ...]
    analyses: Tuple[PasswordAnalysis, ...] = ()

    def as_lines(self, show_meta: bool = False) -> Tuple[str, ...]:
        if not show_meta or len(self.analyses) != len(self.outputs):
            return self.outputs
        return tuple(f"{value}\t{analysis.meta_text()}" for value, analysis in zip(self.outputs, self.analyses))
