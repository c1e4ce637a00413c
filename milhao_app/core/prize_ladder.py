"""The fixed prize ladder and helpers built on it."""

from __future__ import annotations

from milhao_app.constants.game_constants import NO_TITLE_REACHED, TOTAL_LEVELS
from milhao_app.core.models import GameStatus, PrizeLadderEntry

PRIZE_LADDER: tuple[PrizeLadderEntry, ...] = (
    PrizeLadderEntry(level=1, prize=1_000, stop=0, wrong=0, title="Ovelhinha"),
    PrizeLadderEntry(level=2, prize=2_000, stop=1_000, wrong=500, title="Aprendiz da Palavra"),
    PrizeLadderEntry(level=3, prize=3_000, stop=2_000, wrong=1_000, title="Leitor Fiel"),
    PrizeLadderEntry(level=4, prize=4_000, stop=3_000, wrong=1_500, title="Porteiro do Templo"),
    PrizeLadderEntry(level=5, prize=5_000, stop=4_000, wrong=2_000, title="Levita"),
    PrizeLadderEntry(level=6, prize=10_000, stop=5_000, wrong=2_500, title="Escriba"),
    PrizeLadderEntry(level=7, prize=20_000, stop=10_000, wrong=5_000, title="Diácono"),
    PrizeLadderEntry(level=8, prize=30_000, stop=20_000, wrong=10_000, title="Presbítero"),
    PrizeLadderEntry(level=9, prize=40_000, stop=30_000, wrong=15_000, title="Evangelista"),
    PrizeLadderEntry(level=10, prize=50_000, stop=40_000, wrong=20_000, title="Profeta"),
    PrizeLadderEntry(level=11, prize=100_000, stop=50_000, wrong=25_000, title="Juiz de Israel"),
    PrizeLadderEntry(level=12, prize=200_000, stop=100_000, wrong=50_000, title="Sacerdote"),
    PrizeLadderEntry(level=13, prize=300_000, stop=200_000, wrong=100_000, title="Sumo Sacerdote"),
    PrizeLadderEntry(level=14, prize=400_000, stop=300_000, wrong=150_000, title="Apóstolo"),
    PrizeLadderEntry(level=15, prize=500_000, stop=400_000, wrong=200_000, title="Patriarca"),
    # Failing or stopping on the final question awards nothing.
    PrizeLadderEntry(level=16, prize=1_000_000, stop=0, wrong=0, title="Sabedoria de Salomão"),
)

_BY_LEVEL: dict[int, PrizeLadderEntry] = {entry.level: entry for entry in PRIZE_LADDER}


def lookup(level: int) -> PrizeLadderEntry | None:
    """Return the ladder entry for ``level`` or None when out of range."""
    return _BY_LEVEL.get(level)


def entry_for(level: int) -> PrizeLadderEntry:
    entry = lookup(level)
    if entry is None:
        raise IndexError(f"No prize ladder entry for level {level}")
    return entry


def reached_title(status: GameStatus, current_level: int) -> str | None:
    """Title earned at the end of a game, None while it is still running.

    The level in play was not completed, so the title comes from the level
    before it, except for a win where the final level counts.
    """
    if status is GameStatus.PLAYING:
        return None
    completed = TOTAL_LEVELS if status is GameStatus.WON else current_level - 1
    entry = lookup(completed)
    return entry.title if entry is not None else NO_TITLE_REACHED


def format_prize(amount: int) -> str:
    """Format an amount the way the ladder shows it, e.g. ``R$ 10.000``."""
    return "R$ " + f"{amount:,}".replace(",", ".")
