"""
Char decoder protocol and the drivers that run it over a unit source.

A decoder is a finite-state machine fed one unit at a time. `start` sees the
first unit of a sequence and `advance` every later one; both return a step:

* `Accept(scalar)` when the sequence is complete,
* a pending state (any other object) when more units are needed,
* `None` to reject.

Pending states carry the bits accumulated so far, so a machine suspended
between units resumes without re-reading or re-validating anything.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Optional, Type

from .errors import DecodeError
from .source import UnitSource

logger = logging.getLogger(__name__)

MAX_SCALAR = 0x10FFFF


class Accept(NamedTuple):
    scalar: int


# Accept, a pending state, or None to reject.
Step = Optional[Any]


def is_scalar_value(value: int) -> bool:
    return 0 <= value <= MAX_SCALAR and not 0xD800 <= value <= 0xDFFF


class CharDecoder:
    """Base class for the per-encoding state machines."""

    name: str = ""
    unit_width: int = 8
    error_class: Type[DecodeError] = DecodeError

    def start(self, unit: int) -> Step:
        raise NotImplementedError

    def advance(self, state: Any, unit: int) -> Step:
        raise NotImplementedError

    def error(self) -> DecodeError:
        return self.error_class(self.name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def decode_char(decoder: CharDecoder, source: UnitSource) -> str:
    """Decode one scalar value, consuming its units or none at all."""
    mark = source.mark()
    unit = source.read()
    step: Step = None if unit is None else decoder.start(unit)
    while step is not None and not isinstance(step, Accept):
        unit = source.read()
        step = None if unit is None else decoder.advance(step, unit)
    if step is None:
        source.reset(mark)
        logger.debug("%s rejected at unit %d", decoder.name, mark)
        raise decoder.error()
    return chr(step.scalar)


def decode_string(decoder: CharDecoder, source: UnitSource) -> str:
    """
    Decode scalar values until the first failure.

    The failing units stay at the front of `source` so the caller can inspect
    them or retry with another decoder.
    """
    out = []
    while not source.at_end():
        try:
            out.append(decode_char(decoder, source))
        except DecodeError:
            logger.debug(
                "%s string stopped at unit %d after %d scalars",
                decoder.name,
                source.position,
                len(out),
            )
            break
    return "".join(out)

