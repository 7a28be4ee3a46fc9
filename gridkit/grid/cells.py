"""Two-state cell values.

``Bit`` and ``Light`` both parse from and render to the ``#``/``.`` glyph
vocabulary, so a grid of them survives a text -> grid -> text round trip.
``Bit`` additionally accepts the digits ``1`` and ``0`` on input.
"""

from __future__ import annotations

from enum import Enum

from ..errors import InvalidTokenError


class _TwoState(Enum):
    # Subclasses define ON and OFF and the accepted input glyphs.

    @classmethod
    def from_bool(cls, value: bool):
        return cls.ON if value else cls.OFF

    def is_on(self) -> bool:
        return self is type(self).ON

    def invert(self):
        cls = type(self)
        return cls.OFF if self is cls.ON else cls.ON

    def __bool__(self) -> bool:
        return self.is_on()

    def __str__(self) -> str:
        return "#" if self.is_on() else "."


class Bit(_TwoState):
    OFF = 0
    ON = 1

    @classmethod
    def from_char(cls, char: str) -> "Bit":
        if char in ("#", "1"):
            return cls.ON
        if char in (".", "0"):
            return cls.OFF
        raise InvalidTokenError(char)

    def is_enabled(self) -> bool:
        return self.is_on()

    def is_solid(self) -> bool:
        return self.is_on()

    def digit(self) -> str:
        return "1" if self.is_on() else "0"


class Light(_TwoState):
    OFF = 0
    ON = 1

    @classmethod
    def from_char(cls, char: str) -> "Light":
        if char == "#":
            return cls.ON
        if char == ".":
            return cls.OFF
        raise InvalidTokenError(char)


__all__ = ["Bit", "Light"]
