import datetime
import math
from typing import Optional

from core.errors import InvalidInputError

TRUE_WORDS = {"true", "yes", "y", "1"}
FALSE_WORDS = {"false", "no", "n", "0"}


def month_name(m: int) -> str:
    """
    Returns the full name of a month.
    Example: 1 -> 'January', 2 -> 'February'.
    """
    # 1900 is an arbitrary valid year used just to format the month name
    return datetime.date(1900, m, 1).strftime("%B")


def parse_iso_date(text: str) -> datetime.date:
    """Parses a 'YYYY-MM-DD' string, raising InvalidInputError on bad input."""
    try:
        return datetime.date.fromisoformat(text.strip())
    except ValueError:
        raise InvalidInputError(f"Invalid date '{text}'. Use YYYY-MM-DD.")


def parse_bool(text: str) -> bool:
    """
    Parses a yes/no style answer.
    Accepts true/false, yes/no, y/n and 1/0 in any casing.
    """
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise InvalidInputError(f"Expected true/false, got '{text}'.")


def parse_int(text: str, low: Optional[int] = None, high: Optional[int] = None) -> int:
    """
    Parses an integer and optionally checks it lies within [low, high].
    """
    try:
        value = int(text.strip())
    except ValueError:
        raise InvalidInputError(f"'{text}' is not a whole number.")

    if low is not None and value < low:
        raise InvalidInputError(f"{value} is below the minimum of {low}.")
    if high is not None and value > high:
        raise InvalidInputError(f"{value} is above the maximum of {high}.")
    return value


def check_fee(value: float) -> float:
    """Rejects amounts that are negative, NaN or infinite."""
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"Fee must be a finite amount, got {value}.")
    if value < 0:
        raise InvalidInputError("Fee cannot be negative.")
    return value


def parse_fee(text: str) -> float:
    """Parses a non-negative money amount."""
    try:
        value = float(text.strip())
    except ValueError:
        raise InvalidInputError(f"'{text}' is not a valid amount.")
    return check_fee(value)
