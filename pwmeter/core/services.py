from __future__ import annotations

from pwmeter.core.password_analyzer import analyze
from pwmeter.core.password_engine import generate_password as generate
from pwmeter.core.password_service import generate_passwords

__all__ = ["analyze", "generate", "generate_passwords"]
