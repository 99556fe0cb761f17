import pytest

from craftproto.gamemode import Gamemode, InvalidGamemodeError


@pytest.mark.parametrize(
    "text,mode",
    [
        ("0", Gamemode.SURVIVAL),
        ("s", Gamemode.SURVIVAL),
        ("survival", Gamemode.SURVIVAL),
        ("Survival", Gamemode.SURVIVAL),
        ("1", Gamemode.CREATIVE),
        ("c", Gamemode.CREATIVE),
        ("creative", Gamemode.CREATIVE),
        ("Creative", Gamemode.CREATIVE),
        ("2", Gamemode.ADVENTURE),
        ("a", Gamemode.ADVENTURE),
        ("adventure", Gamemode.ADVENTURE),
        ("Adventure", Gamemode.ADVENTURE),
        ("3", Gamemode.SPECTATOR),
        ("sp", Gamemode.SPECTATOR),
        ("spectator", Gamemode.SPECTATOR),
        ("Spectator", Gamemode.SPECTATOR),
    ],
)
def test_parse_aliases(text, mode):
    assert Gamemode.parse(text) is mode


@pytest.mark.parametrize("text", ["4", "SURVIVAL", "", "spec", " s"])
def test_parse_rejects_unknown(text):
    with pytest.raises(InvalidGamemodeError):
        Gamemode.parse(text)


def test_error_message():
    with pytest.raises(InvalidGamemodeError, match="Not a valid gamemode."):
        Gamemode.parse("hardcore")