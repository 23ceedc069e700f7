"""The activator: picks a random atom to split at every step."""

from __future__ import annotations

import random
from typing import Optional

from .state import FREE, ReactorState


class Activator:
    """Chooses victim atoms at random from the pid table."""

    def __init__(
        self,
        state: ReactorState,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.state = state
        self.rng = rng or random.Random()

    def choose_victim(self) -> Optional[int]:
        """Pick a random slot; return its pid if an atom lives there.

        A chosen atom counts as an activation. A free slot or an empty
        table yields None and leaves the counters alone.
        """
        table = self.state.table
        if len(table) == 0:
            return None
        pid = table[self.rng.randrange(len(table))]
        if pid == FREE:
            return None
        self.state.record_activation()
        return pid