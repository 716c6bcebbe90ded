"""Display options controlling how a question attempt is rendered."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

HIDDEN = 0
VISIBLE = 1


@dataclass
class DisplayOptions:
    """Visibility flags plus free-form markup accumulators.

    Behaviours may adjust these before rendering, so callers that reuse an
    instance across several renders should hand out clones.
    """

    readonly: bool = False
    correctness: int = VISIBLE
    marks: int = VISIBLE
    feedback: int = VISIBLE
    generalfeedback: int = VISIBLE
    rightanswer: int = VISIBLE
    manualcomment: int = VISIBLE
    history: int = HIDDEN
    flags: int = VISIBLE
    extrainfocontent: str = ""
    extrahistorycontent: str = ""

    def clone(self) -> DisplayOptions:
        """Return an independent copy."""
        return dataclasses.replace(self)
