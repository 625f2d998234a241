"""Voor (handicap stroke) allocation.

Two separate questions are answered here:

* ``allocate_stroke_holes`` - on which holes does a player receive a stroke
  at all? This is the union over everyone giving them strokes and drives
  net scores.
* ``gets_stroke_from`` - does one particular giver grant one particular
  receiver a stroke on a given hole? Fighter tie-breaks are decided by this
  pairwise check, not by the union.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Set

from models.hole import Hole
from models.player import Player
from models.results import StrokeAllocation, VoorGrant


def holes_by_difficulty(holes: Iterable[Hole]) -> List[Hole]:
    """Holes ordered hardest first (stroke index, then hole number)."""
    return sorted(holes, key=lambda h: (h.stroke_index, h.number))


def hardest_holes(strokes: int, holes: Sequence[Hole]) -> List[int]:
    """Numbers of the ``strokes`` hardest holes, clamped to the layout size."""
    if strokes <= 0:
        return []
    return [h.number for h in holes_by_difficulty(holes)[:strokes]]


def strokes_received(players: Sequence[Player]) -> Dict[str, int]:
    """Configured strokes each player receives, summed over all givers."""
    received = {p.id: 0 for p in players}
    for giver in players:
        for receiver_id in received:
            if receiver_id != giver.id:
                received[receiver_id] += giver.strokes_to(receiver_id)
    return received


def allocate_stroke_holes(players: Sequence[Player], holes: Sequence[Hole]) -> Dict[str, Set[int]]:
    """Map each player id to the set of hole numbers where they get a stroke.

    Every giver places their strokes on their own hardest holes; the
    receiver's set is the union. Overlapping allocations count once, so a
    player can hold fewer stroke holes than strokes configured.
    """
    allocation: Dict[str, Set[int]] = {p.id: set() for p in players}
    for giver in players:
        for receiver_id in allocation:
            if receiver_id == giver.id:
                continue
            allocation[receiver_id].update(hardest_holes(giver.strokes_to(receiver_id), holes))
    return allocation


def has_stroke(player_id: str, hole_number: int, stroke_holes: Dict[str, Set[int]]) -> bool:
    return hole_number in stroke_holes.get(player_id, set())


def gets_stroke_from(giver: Player, receiver_id: str, hole_number: int, holes: Sequence[Hole]) -> bool:
    """Whether ``giver`` on their own grants ``receiver_id`` a stroke on this hole."""
    if giver.id == receiver_id:
        return False
    return hole_number in hardest_holes(giver.strokes_to(receiver_id), holes)


def stroke_allocations(players: Sequence[Player], holes: Sequence[Hole]) -> List[StrokeAllocation]:
    """Per-player view of configured strokes next to the resulting stroke holes."""
    received = strokes_received(players)
    allocation = allocate_stroke_holes(players, holes)
    return [
        StrokeAllocation(
            player_id=p.id,
            strokes_received=received[p.id],
            stroke_holes=sorted(allocation[p.id]),
            hole_count=len(allocation[p.id]),
        )
        for p in players
    ]


def voor_grants(players: Sequence[Player]) -> List[VoorGrant]:
    """Every positive giving relationship between players on the roster."""
    by_id = {p.id: p for p in players}
    grants = []
    for giver in players:
        for receiver_id in giver.gives_strokes:
            strokes = giver.strokes_to(receiver_id)
            receiver = by_id.get(receiver_id)
            if strokes == 0 or receiver is None or receiver.id == giver.id:
                continue
            grants.append(VoorGrant(
                giver_id=giver.id,
                giver=giver.name,
                receiver_id=receiver.id,
                receiver=receiver.name,
                strokes=strokes,
            ))
    return grants
