from __future__ import annotations

from .types import ContestOutcome, Outcome, Role


def determine_outcome(player: Role, opponent: Role) -> Outcome:
    if player.category == "no_pair" and opponent.category == "no_pair":
        return "draw"
    if player.points > opponent.points:
        return "win"
    if player.points < opponent.points:
        return "lose"
    # equal non-zero points cannot come out of the point tables
    return "draw"


def score_delta(outcome: Outcome, player: Role, opponent: Role) -> int:
    """Score change for the player: the winner's own role points, signed."""
    if outcome == "win":
        return player.points
    if outcome == "lose":
        return -opponent.points
    return 0


def resolve_contest(player: Role, opponent: Role) -> ContestOutcome:
    result = determine_outcome(player, opponent)
    return ContestOutcome(result=result, delta=score_delta(result, player, opponent))
