import math
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BeforeValidator


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise be read as 1/0
    if isinstance(value, bool):
        raise ValueError("must be a number")
    return value


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("must be a finite number")
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError("must be a valid email") from e
    return value


# Email addresses are checked but kept exactly as submitted
EmailAddress = Annotated[str, AfterValidator(_check_email)]

Integer = Annotated[int, BeforeValidator(_reject_bool)]
Number = Annotated[float, BeforeValidator(_reject_bool), AfterValidator(_require_finite)]
