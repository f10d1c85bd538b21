"""
params.py — Operation Parameters
=================================
Parses the two free-text inputs of the control panel (value, position)
into an OperationParams the operations understand.

    empty value        → None       (inserts draw a random value)
    non-integer value  → raw text   (operations reject it)
    empty / bad pos    → 0
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class OperationParams:
    value:    Any           = None
    position: Optional[int] = None


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def parse_value(text: Optional[str]) -> Any:
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    if number.is_integer():
        return int(number)
    return text


def parse_position(text: Optional[str]) -> int:
    if text is None:
        return 0
    try:
        return int(str(text).strip())
    except ValueError:
        return 0


def parse_params(value_text: Optional[str] = None, position_text: Optional[str] = None) -> OperationParams:
    return OperationParams(value=parse_value(value_text), position=parse_position(position_text))
