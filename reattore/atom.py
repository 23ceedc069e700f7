"""Atoms: split while their atomic number is high enough, then decay into waste."""

from __future__ import annotations

import random
from typing import Optional

from .inhibitor import Inhibitor
from .state import Config, ReactorState


def released_energy(child: int, parent: int, absorbed: int = 0) -> int:
    """Energy freed by a split, less what the inhibitor absorbed."""
    return child * parent - max(child, parent) - absorbed


class Atom:
    """One atom of the reactor."""

    def __init__(
        self,
        pid: int,
        atomic_number: int,
        state: ReactorState,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
        inhibitor: Optional[Inhibitor] = None,
    ) -> None:
        self.pid = pid
        self.atomic_number = atomic_number
        self.state = state
        self.config = config or state.config
        self.rng = rng or random.Random()
        self.inhibitor = inhibitor
        self.alive = True

    def __repr__(self) -> str:
        return f"Atom(pid={self.pid}, atomic_number={self.atomic_number})"

    def can_split(self) -> bool:
        return self.atomic_number > self.config.n_atomic_min

    def split(self, new_pid: int) -> Optional["Atom"]:
        """Split off a child atom with pid ``new_pid``.

        The parent's atomic number drops even if the inhibitor vetoes the
        split; in that case None is returned and no child is recorded.
        """
        if not self.alive:
            raise RuntimeError(f"atom {self.pid} has already decayed")
        if self.atomic_number <= 0:
            raise ValueError("an atom with no nucleons cannot split")
        child_number = self.rng.randrange(self.atomic_number)
        self.atomic_number -= child_number

        allowed = True
        absorbed = 0
        if self.inhibitor is not None:
            decision = self.inhibitor.regulate()
            allowed = decision.allowed
            absorbed = decision.energy
        if not allowed:
            return None

        energy = released_energy(child_number, self.atomic_number, absorbed)
        self.state.add_atom(new_pid, energy)
        return Atom(
            new_pid,
            child_number,
            self.state,
            self.config,
            self.rng,
            self.inhibitor,
        )

    def decay(self) -> int:
        """Turn the atom into waste; return the slot it freed."""
        if not self.alive:
            raise RuntimeError(f"atom {self.pid} has already decayed")
        index = self.state.remove_atom(self.pid, self.atomic_number)
        self.alive = False
        return index

    def activate(self, new_pid: int) -> Optional["Atom"]:
        """React to the activator: split if possible, otherwise decay."""
        if self.can_split():
            return self.split(new_pid)
        self.decay()
        return None