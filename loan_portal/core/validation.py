from typing import Any, Dict, Sequence

# Pydantic error types that read better with a fixed phrase
_MESSAGES = {
    "missing": "is required",
    "extra_forbidden": "is not allowed",
    "string_too_short": "is not allowed to be empty",
}


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts)


def format_validation_error(error: Dict[str, Any]) -> str:
    """Render a single pydantic error entry as a short message, e.g. '"email" is required'."""
    field = _field_name(error.get("loc", ()))
    message = _MESSAGES.get(error.get("type"), error.get("msg", "is invalid"))
    if error.get("type") == "value_error" and message.startswith("Value error, "):
        message = message[len("Value error, "):]
    if not field:
        return message if error.get("type") not in _MESSAGES else f"request body {message}"
    if error.get("type") not in _MESSAGES and message:
        message = message[0].lower() + message[1:]
    return f'"{field}" {message}'


def first_validation_message(errors: Sequence[Dict[str, Any]]) -> str:
    """Only the first violation is reported back to the client."""
    if not errors:
        return "Invalid request body"
    return format_validation_error(errors[0])
