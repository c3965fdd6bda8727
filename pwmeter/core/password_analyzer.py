from __future__ import annotations

from pwmeter.core import password_checks as checks
from pwmeter.core.models import PasswordAnalysis, PatternFlags, Requirements
from pwmeter.core.password_entropy import estimate_entropy_bits, format_crack_time, round_half_up
from pwmeter.core.password_tables import LENGTH_BONUS_THRESHOLDS, STRENGTH_BANDS, StrengthBand

MAX_SCORE = 100
MAX_ENTROPY_POINTS = 40.0
LENGTH_BONUS = 10
CLASS_BONUS = 5
SYMBOL_BONUS = 10
COMMON_PENALTY = 25
REPEAT_PENALTY = 10
SEQUENCE_PENALTY = 10
KEYBOARD_PENALTY = 15

EMPTY_ANALYSIS = PasswordAnalysis()


def check_requirements(password: str) -> Requirements:
    return Requirements(
        has_min_length=checks.has_min_length(password),
        has_uppercase=checks.has_uppercase(password),
        has_lowercase=checks.has_lowercase(password),
        has_digit=checks.has_digit(password),
        has_symbol=checks.has_symbol(password),
        is_not_common=not checks.is_common_password(password),
    )


def detect_patterns(password: str) -> PatternFlags:
    return PatternFlags(
        is_common=checks.is_common_password(password),
        has_repeats=checks.has_repeated_characters(password),
        has_sequence=checks.has_sequential_characters(password),
        has_keyboard_pattern=checks.has_keyboard_pattern(password),
    )


def calculate_score(password: str, requirements: Requirements, patterns: PatternFlags, entropy_bits: float) -> int:
    """Additive composite score, clamped to 0..100 and rounded half-up."""
    if not password:
        return 0

    score = min(entropy_bits / 2.0, MAX_ENTROPY_POINTS)

    length = len(password)
    for threshold in LENGTH_BONUS_THRESHOLDS:
        if length >= threshold:
            score += LENGTH_BONUS

    if requirements.has_uppercase:
        score += CLASS_BONUS
    if requirements.has_lowercase:
        score += CLASS_BONUS
    if requirements.has_digit:
        score += CLASS_BONUS
    if requirements.has_symbol:
        score += SYMBOL_BONUS

    if patterns.is_common:
        score -= COMMON_PENALTY
    if patterns.has_repeats:
        score -= REPEAT_PENALTY
    if patterns.has_sequence:
        score -= SEQUENCE_PENALTY
    if patterns.has_keyboard_pattern:
        score -= KEYBOARD_PENALTY

    return round_half_up(max(0.0, min(float(MAX_SCORE), score)))


def strength_level_for(score: int) -> StrengthBand:
    for band in STRENGTH_BANDS:
        if band.contains(score):
            return band
    return STRENGTH_BANDS[0]


def analyze(password: str) -> PasswordAnalysis:
    if not password:
        return EMPTY_ANALYSIS

    requirements = check_requirements(password)
    patterns = detect_patterns(password)
    entropy_bits = estimate_entropy_bits(password)
    score = calculate_score(password, requirements, patterns, entropy_bits)
    return PasswordAnalysis(
        score=score,
        strength_level=strength_level_for(score),
        entropy_bits=entropy_bits,
        crack_time_estimate=format_crack_time(entropy_bits),
        requirements=requirements,
        length=len(password),
        patterns=patterns,
    )
