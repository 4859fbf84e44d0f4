"""Incremental decoding for sources that deliver units in chunks."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List

from .codecs import EncodingLike, lookup
from .steps import Accept

logger = logging.getLogger(__name__)


class StreamDecoder:
    """
    Decode units pushed in arbitrary chunks.

    A sequence split across chunks is parked as the machine's pending state and
    resumed on the next `feed`. The first rejection halts the decoder; the
    rejected sequence and everything after it is kept in `leftover`.
    """

    def __init__(self, encoding: EncodingLike) -> None:
        self.encoding = lookup(encoding)
        self.decoder = self.encoding.decoder
        self.position = 0
        self.halted = False
        self.finished = False
        self.leftover: List[int] = []
        self._state: Any = None
        self._held: List[int] = []

    def feed(self, units: Iterable[int]) -> str:
        if self.finished:
            raise ValueError("feed() after finish()")
        units = list(units)
        width = self.decoder.unit_width
        limit = 1 << width
        for unit in units:
            if not 0 <= unit < limit:
                raise ValueError(
                    f"Unit out of range for {width}-bit {self.decoder.name}: {unit:#x}"
                )
        if self.halted:
            self.leftover.extend(units)
            return ""

        out = []
        it = iter(units)
        for unit in it:
            if self._held:
                step = self.decoder.advance(self._state, unit)
            else:
                step = self.decoder.start(unit)
            self._held.append(unit)
            if step is None:
                self._halt(it)
                break
            if isinstance(step, Accept):
                out.append(chr(step.scalar))
                self.position += len(self._held)
                self._held = []
                self._state = None
            else:
                self._state = step
        return "".join(out)

    def _halt(self, rest: Iterator[int]) -> None:
        logger.debug("%s stream halted at unit %d", self.decoder.name, self.position)
        self.halted = True
        self.leftover = self._held + list(rest)
        self._held = []
        self._state = None

    def finish(self) -> List[int]:
        """Mark end of input and return every unit that was not decoded."""
        self.finished = True
        if self._held:
            logger.debug(
                "%s stream ended inside a sequence at unit %d", self.decoder.name, self.position
            )
            self.halted = True
            self.leftover = self._held
            self._held = []
            self._state = None
        return list(self.leftover)


def iterdecode(chunks: Iterable[Iterable[int]], encoding: EncodingLike) -> Iterator[str]:
    """Yield decoded text as each chunk completes it, stopping at the first failure."""
    decoder = StreamDecoder(encoding)
    for chunk in chunks:
        text = decoder.feed(chunk)
        if text:
            yield text
        if decoder.halted:
            return
    decoder.finish()
