"""Game participants."""

from __future__ import annotations

from chesschecker.core.enums import Color


class Player:
    """A named participant playing one color.

    The name is stored as given; ``None`` and ``""`` are accepted.
    """

    __slots__ = ("_name", "_color")

    def __init__(self, name: str | None, color: Color) -> None:
        self._name = name
        self._color = color

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def color(self) -> Color:
        return self._color

    def __str__(self) -> str:
        return f"{self._name} ({self._color.name})"

    def __repr__(self) -> str:
        return f"Player({self._name!r}, {self._color.name})"
