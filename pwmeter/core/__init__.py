"""Password strength analysis, generation, and service APIs for PwMeter."""

from __future__ import annotations


def analyze(password):
    from pwmeter.core.password_analyzer import analyze as _analyze

    return _analyze(password)


def generate(config):
    from pwmeter.core.password_engine import generate_password as _generate_password

    return _generate_password(config)


def generate_passwords(request):
    from pwmeter.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(request)


__all__ = ["analyze", "generate", "generate_passwords"]
