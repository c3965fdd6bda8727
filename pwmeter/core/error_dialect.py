from __future__ import annotations

NO_CHARACTER_CLASSES = "no_character_classes"
INVALID_LENGTH = "invalid_length"
INVALID_COUNT = "invalid_count"
RNG_UNAVAILABLE = "rng_unavailable"
INPUT_ERROR = "input_error"
INVALID_REQUEST = "invalid_request"

ERROR_CODES = frozenset(
    {
        NO_CHARACTER_CLASSES,
        INVALID_LENGTH,
        INVALID_COUNT,
        RNG_UNAVAILABLE,
        INPUT_ERROR,
        INVALID_REQUEST,
    }
)


class PwMeterError(ValueError):
    """A user-facing failure carrying one of the fixed ``ERROR_CODES``."""

    default_code = INVALID_REQUEST

    def __init__(self, message: str, code: str | None = None) -> None:
        code = code or self.default_code
        if code not in ERROR_CODES:
            raise ValueError(f"unknown error code: {code!r}")
        self.code = code
        self.message = message.strip() or "unspecified error"
        super().__init__(self.message)


class InvalidConfig(PwMeterError):
    """Generator configuration that cannot produce a password."""

    default_code = NO_CHARACTER_CLASSES


class RandomSourceUnavailable(PwMeterError):
    default_code = RNG_UNAVAILABLE


def describe_error(exc: BaseException, *, default_code: str = INVALID_REQUEST) -> tuple[str, str]:
    if isinstance(exc, PwMeterError):
        return exc.code, exc.message
    return default_code, str(exc).strip() or "invalid request"


def format_error_text(exc: BaseException, *, default_code: str = INVALID_REQUEST) -> str:
    code, message = describe_error(exc, default_code=default_code)
    return f"{code}: {message}"


def error_payload(exc: BaseException, *, default_code: str = INVALID_REQUEST) -> dict[str, object]:
    code, message = describe_error(exc, default_code=default_code)
    return {"error": {"code": code, "message": message}}
