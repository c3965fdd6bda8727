from __future__ import annotations

from pwmeter.core import password_engine as engine
from pwmeter.core.error_dialect import INVALID_COUNT, PwMeterError, RandomSourceUnavailable
from pwmeter.core.models import PasswordRequest, PasswordResult
from pwmeter.core.password_analyzer import analyze


def generate_passwords(request: PasswordRequest) -> PasswordResult:
    if isinstance(request.count, bool) or not isinstance(request.count, int):
        raise PwMeterError("count must be an integer", INVALID_COUNT)
    if request.count <= 0:
        raise PwMeterError("count must be > 0", INVALID_COUNT)

    config = request.generator_config()
    engine.validate_config(config)
    try:
        engine.assert_csprng_ready()
    except OSError as e:
        raise RandomSourceUnavailable(str(e)) from e

    outputs: list[str] = []
    analyses = []
    for _ in range(request.count):
        try:
            generated = engine.generate_password(config)
        except OSError as e:
            raise RandomSourceUnavailable(str(e)) from e
        outputs.append(generated)
        if request.show_meta:
            analyses.append(analyze(generated))

    return PasswordResult(outputs=tuple(outputs), analyses=tuple(analyses))
