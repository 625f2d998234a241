from pydantic import Field

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """Represents a single hole in a round's layout."""

    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=5)
    stroke_index: int = Field(..., ge=1, le=18)  # 1 = hardest

    @property
    def label(self) -> str:
        return f"Hole {self.number}"

    @property
    def nine(self) -> str:
        """Which nine the hole belongs to ("Front 9" or "Back 9")."""
        return "Front 9" if self.number <= 9 else "Back 9"
