from typing import Any

from pydantic import ValidationError, ValidatorFunctionWrapHandler


def keep_email_as_given(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Check email syntax with the wrapped ``EmailStr`` validator but keep the raw value.

    ``EmailStr`` lowercases the domain part; stored and compared emails must
    be exactly what the caller sent.
    """
    if handler(value) is None:
        return None
    return value


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line.

    Example: "email: value is not a valid email address; full_name: full_name is required"
    """
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err.get("loc", ())) or "input"
        message = err.get("msg", "invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        parts.append(f"{location}: {message}")
    return "; ".join(parts)
