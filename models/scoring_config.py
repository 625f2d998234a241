from enum import Enum
from pydantic import Field

from .base import BaseGolfModel


class ScoreTier(str, Enum):
    """Score relative to par, bucketed for point lookups."""
    EAGLE_OR_BETTER = "eagle_or_better"  # <= -2
    BIRDIE = "birdie"                    # -1
    PAR = "par"                          # 0
    BOGEY = "bogey"                      # +1
    WORSE = "worse"                      # >= +2

    @classmethod
    def from_to_par(cls, to_par: int) -> "ScoreTier":
        if to_par <= -2:
            return cls.EAGLE_OR_BETTER
        if to_par == -1:
            return cls.BIRDIE
        if to_par == 0:
            return cls.PAR
        if to_par == 1:
            return cls.BOGEY
        return cls.WORSE


class ScoringSystemKind(str, Enum):
    """Which point system a round is played under."""
    FIGHTER = "fighter"              # every pair settles every hole
    SINGLE_WINNER = "single_winner"  # lowest net score takes the hole


class ScoringConfiguration(BaseGolfModel):
    """Points a player earns for beating an opponent, by the tier of the winning score.

    Double bogey or worse never earns anything, so it has no entry here.
    """
    eagle_or_better: int = Field(4, ge=-10, le=10)
    birdie: int = Field(2, ge=-10, le=10)
    par: int = Field(1, ge=-10, le=10)
    bogey: int = Field(1, ge=-10, le=10)

    def award_for(self, tier: ScoreTier) -> int:
        """Points for a win at the given tier."""
        if tier is ScoreTier.EAGLE_OR_BETTER:
            return self.eagle_or_better
        if tier is ScoreTier.BIRDIE:
            return self.birdie
        if tier is ScoreTier.PAR:
            return self.par
        if tier is ScoreTier.BOGEY:
            return self.bogey
        return 0

    def award_for_to_par(self, to_par: int) -> int:
        return self.award_for(ScoreTier.from_to_par(to_par))
