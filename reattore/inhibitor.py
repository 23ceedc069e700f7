"""The inhibitor: absorbs energy and may veto a split."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .state import ReactorState

DEFAULT_ABSORPTION = 10


@dataclass(frozen=True)
class Decision:
    """The inhibitor's answer to a split request."""

    energy: int
    allowed: bool

    @property
    def message(self) -> str:
        verdict = "positivo" if self.allowed else "negativo"
        return (
            f"OPERAZIONE INIBITORE: Energia prelevata: {self.energy}, "
            f"la scissione ha avuto esito {verdict}"
        )


class Inhibitor:
    """Regulates splits: each request absorbs energy and is allowed at random."""

    def __init__(
        self,
        state: ReactorState,
        rng: Optional[random.Random] = None,
        energy: int = DEFAULT_ABSORPTION,
    ) -> None:
        if energy < 0:
            raise ValueError("absorbed energy must not be negative")
        self.state = state
        self.rng = rng or random.Random()
        self.energy = energy

    def regulate(self) -> Decision:
        """Decide on one split, recording the absorbed energy in the state."""
        allowed = self.rng.randrange(2) == 1
        decision = Decision(energy=self.energy, allowed=allowed)
        self.state.absorb(decision.energy)
        return decision