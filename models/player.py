from pydantic import Field, field_validator
from typing import Dict, Iterable, List, Sequence, Tuple

from .base import BaseGolfModel


class Player(BaseGolfModel):
    """A golfer in the round and the voor strokes they give to others."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=50)
    gives_strokes: Dict[str, int] = Field(default_factory=dict)  # {receiver_id: strokes}

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Player name cannot be empty")
        return v

    def strokes_to(self, player_id: str) -> int:
        """Strokes given to ``player_id``; non-positive values count as none."""
        strokes = self.gives_strokes.get(player_id, 0)
        return strokes if strokes > 0 else 0


def players_from_voor_pairs(
    roster: Sequence[Tuple[str, str]],
    voor_pairs: Iterable[Tuple[int, int, int]],
) -> List[Player]:
    """Build players from a positional voor setup.

    ``roster`` is ``[(id, name), ...]`` and ``voor_pairs`` is
    ``[(giver_index, receiver_index, strokes), ...]`` as a setup form
    produces them. Indices are resolved to player ids here, once, so nothing
    downstream depends on roster order.
    """
    given: Dict[str, Dict[str, int]] = {player_id: {} for player_id, _ in roster}
    for giver_index, receiver_index, strokes in voor_pairs:
        giver_id = roster[giver_index][0]
        receiver_id = roster[receiver_index][0]
        given[giver_id][receiver_id] = strokes
    return [
        Player(id=player_id, name=name, gives_strokes=given[player_id])
        for player_id, name in roster
    ]
