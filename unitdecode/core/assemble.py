"""Adapter that builds 16/32-bit units from bytes before an inner machine."""

from __future__ import annotations

from typing import Any, NamedTuple

from .steps import Accept, CharDecoder, Step


class Assembly(NamedTuple):
    inner: Any  # pending state of the wrapped decoder, None before its first unit
    started: bool
    buffer: bytes


class ByteOrderDecoder(CharDecoder):
    """
    Feed a unit-level decoder with units assembled from bytes.

    Only one unit is assembled at a time, so a second unit is read only after
    the wrapped decoder has asked for it.
    """

    unit_width = 8

    def __init__(self, inner: CharDecoder, byteorder: str, name: str) -> None:
        if byteorder not in ("big", "little"):
            raise ValueError(f"Unknown byte order: {byteorder}")
        self.inner = inner
        self.byteorder = byteorder
        self.size = inner.unit_width // 8
        self.name = name
        self.error_class = inner.error_class

    def start(self, unit: int) -> Step:
        return self.advance(Assembly(None, False, b""), unit)

    def advance(self, state: Assembly, unit: int) -> Step:
        buffer = state.buffer + bytes((unit,))
        if len(buffer) < self.size:
            return state._replace(buffer=buffer)
        value = int.from_bytes(buffer, self.byteorder)
        if state.started:
            step = self.inner.advance(state.inner, value)
        else:
            step = self.inner.start(value)
        if step is None or isinstance(step, Accept):
            return step
        return Assembly(step, True, b"")
