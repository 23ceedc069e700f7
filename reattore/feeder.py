"""The feeder: periodically brings fresh atoms into the reactor."""

from __future__ import annotations

import random
from typing import Callable, Optional

from .state import Config, ReactorState

Spawn = Callable[[int], int]
"""Creates an atom with the given atomic number and returns its pid."""


class Feeder:
    """Adds ``config.n_new_atoms`` atoms to the reactor at every step."""

    def __init__(
        self,
        state: ReactorState,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
        spawn: Optional[Spawn] = None,
    ) -> None:
        if spawn is None:
            raise TypeError("a spawn callable is required")
        self.state = state
        self.config = config or state.config
        self.rng = rng or random.Random()
        self.spawn = spawn

    def feed(self) -> list[int]:
        """Create a batch of atoms and record their pids.

        Each atom gets a random atomic number below ``n_atomic_max``. Atoms
        already created stay recorded if ``spawn`` fails part-way; the
        failure is propagated so that the caller can end the simulation.
        """
        pids = []
        for _ in range(self.config.n_new_atoms):
            atomic_number = self.rng.randrange(self.config.n_atomic_max)
            pid = self.spawn(atomic_number)
            self.state.register_atom(pid)
            pids.append(pid)
        return pids