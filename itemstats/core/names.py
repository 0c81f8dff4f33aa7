"""
itemstats.core.names
====================

Typed names shared across the package.

- `CorrelationKind`: an Enum for the two item-total correlation strategies.
- `OptionLabel`, `OptionCode`: NewType wrappers for response option identifiers.
- `OptionId`: the closed union of both identifier forms.

Examples
--------
>>> from itemstats.core.names import CorrelationKind, OptionLabel, is_option_id
>>> CorrelationKind.ORDINAL.value
'ordinal'
>>> oid = OptionLabel("A"); isinstance(oid, str)
True
>>> is_option_id(2.0), is_option_id(True), is_option_id(None)
(True, False, False)
"""

from __future__ import annotations
from enum import Enum
from numbers import Real
from typing import Any, NewType, Union


class CorrelationKind(str, Enum):
    """Item-total correlation strategies.

    - LINEAR: Pearson (point-biserial for 0/1 scores)
    - ORDINAL: polyserial, option scores are ordered integer categories
    """

    LINEAR = "linear"
    ORDINAL = "ordinal"


# Response options are named either by a label ("A", "B", ...) or by the
# numeric score value they carry (0, 1, 2, ...).
OptionLabel = NewType("OptionLabel", str)
OptionCode = NewType("OptionCode", float)
OptionId = Union[OptionLabel, OptionCode, str, int, float]


def is_option_id(value: Any) -> bool:
    """Return True if `value` is a string label or a real-valued code."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, Real))
