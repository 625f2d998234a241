from pydantic import Field
from typing import Dict, List, Optional, Sequence

from .base import BaseGolfModel
from .hole import Hole

# Standard difficulty ranking, 1 = hardest.
DEFAULT_STROKE_INDEX = [
    1, 11, 5, 15, 3, 13, 7, 17, 9,   # Front 9
    2, 12, 6, 16, 4, 14, 8, 18, 10,  # Back 9
]

DEFAULT_PARS = [
    4, 4, 3, 5, 4, 4, 3, 4, 5,  # Front 9 (Par 36)
    4, 4, 4, 3, 5, 4, 4, 3, 5,  # Back 9 (Par 36)
]


class Course(BaseGolfModel):
    """A 9- or 18-hole layout that a round can be played on."""

    id: Optional[str] = None
    name: Optional[str] = None
    holes: List[Hole] = Field(default_factory=list)

    @classmethod
    def from_layout(
        cls,
        pars: Sequence[int],
        stroke_indexes: Sequence[int],
        name: Optional[str] = None,
        id: Optional[str] = None,
    ) -> "Course":
        """Build a course from parallel par and stroke-index lists."""
        holes = [
            Hole(number=number, par=par, stroke_index=stroke_index)
            for number, (par, stroke_index) in enumerate(zip(pars, stroke_indexes), start=1)
        ]
        return cls(id=id, name=name, holes=holes)

    @classmethod
    def from_nines(cls, front: "Course", back: "Course", name: Optional[str] = None) -> "Course":
        """Play two 9-hole courses back to back as one 18-hole round.

        The second nine is renumbered 10-18 and its stroke indices are
        offset by 9, so the front nine holds the hardest holes 1-9.
        """
        if len(front.holes) != 9 or len(back.holes) != 9:
            raise ValueError("Both courses must have exactly 9 holes")
        holes = [h.model_copy() for h in front.holes]
        holes += [
            Hole(number=h.number + 9, par=h.par, stroke_index=h.stroke_index + 9)
            for h in back.holes
        ]
        if name is None and front.name and back.name:
            name = f"{front.name} + {back.name}"
        return cls(name=name, holes=holes)

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    def get_par(self) -> int:
        return sum(h.par for h in self.holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        """Calculate par for holes 1-9."""
        front = [h for h in self.holes if 1 <= h.number <= 9]
        return sum(h.par for h in front) if front else None

    @property
    def back_nine_par(self) -> Optional[int]:
        """Calculate par for holes 10-18."""
        back = [h for h in self.holes if 10 <= h.number <= 18]
        return sum(h.par for h in back) if back else None


def standard_course() -> Course:
    return Course.from_layout(DEFAULT_PARS, DEFAULT_STROKE_INDEX, name="Standard Par 72", id="standard")


def course_presets() -> Dict[str, Course]:
    """Built-in layouts offered when no course is configured."""
    return {
        "standard": standard_course(),
        "executive": Course.from_layout(
            [3, 4, 3, 4, 3, 4, 3, 4, 3, 4, 3, 4, 3, 4, 3, 4, 3, 4],  # Par 63
            [1, 7, 3, 9, 5, 11, 2, 8, 4, 10, 6, 12, 13, 15, 14, 16, 17, 18],
            name="Executive Course",
            id="executive",
        ),
        "championship": Course.from_layout(
            [4, 5, 4, 3, 4, 5, 4, 3, 4, 5, 4, 3, 4, 5, 4, 3, 4, 4],
            [1, 13, 3, 15, 5, 11, 7, 17, 9, 2, 14, 4, 16, 6, 12, 8, 18, 10],
            name="Championship Course",
            id="championship",
        ),
    }
