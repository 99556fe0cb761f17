"""Game modes and their textual forms."""

from __future__ import annotations

import enum


class InvalidGamemodeError(ValueError):
    """The text names no game mode."""

    def __init__(self) -> None:
        super().__init__("Not a valid gamemode.")


class Gamemode(enum.Enum):
    SURVIVAL = 0
    CREATIVE = 1
    ADVENTURE = 2
    SPECTATOR = 3

    @classmethod
    def parse(cls, text: str) -> Gamemode:
        """Accept a number, a short letter code or the name, lower or capitalised."""
        try:
            return _ALIASES[text]
        except (KeyError, TypeError):
            raise InvalidGamemodeError() from None


_ALIASES = {
    alias: mode
    for mode, aliases in (
        (Gamemode.SURVIVAL, ("0", "s", "survival", "Survival")),
        (Gamemode.CREATIVE, ("1", "c", "creative", "Creative")),
        (Gamemode.ADVENTURE, ("2", "a", "adventure", "Adventure")),
        (Gamemode.SPECTATOR, ("3", "sp", "spectator", "Spectator")),
    )
    for alias in aliases
}