import math
import datetime
from typing import Any, Optional, Union

Number = Union[int, float]


# -------------------------------------------------
# TIME
# -------------------------------------------------
def now_iso() -> str:
    """
    UTC timestamp in the `2026-01-20T12:33:00.123Z` shape the frontend parses.
    """
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# -------------------------------------------------
# INPUT NORMALISATION
# -------------------------------------------------
def clean(value: Any) -> str:
    """Trimmed string form of a request value; None becomes ''."""
    if value is None:
        return ""
    return str(value).strip()


def clean_lower(value: Any) -> str:
    return clean(value).lower()


def as_text(value: Any) -> str:
    """String form without trimming; None becomes ''."""
    if value is None:
        return ""
    return str(value)


def to_number(value: Any) -> Optional[Number]:
    """
    Lenient numeric coercion for form/JSON inputs.

    "5" -> 5, "9.99" -> 9.99, 7.0 -> 7
    None, "", "abc", NaN and infinities -> None
    """
    if value is None:
        return None

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None

    if math.isnan(number) or math.isinf(number):
        return None

    if number.is_integer():
        return int(number)
    return number


def to_int(value: Any) -> Optional[int]:
    """Whole numbers only: "3" -> 3, "3.0" -> 3, "1.5" -> None."""
    number = to_number(value)
    if not isinstance(number, int):
        return None
    return number


def same_name(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive username/email comparison; empty values never match."""
    if not a or not b:
        return False
    return a.lower() == b.lower()
