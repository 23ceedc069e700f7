"""Shared reactor state: configuration, pid table and energy bookkeeping."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

FREE = -1
"""Marker for a pid-table slot whose atom has decayed."""


@dataclass(frozen=True)
class Config:
    """Simulation parameters."""

    n_atoms_init: int = 1000
    energy_demand: int = 2000
    energy_consumption: int = 100
    n_atom_max: int = 100
    sim_duration: int = 100
    energy_explode_threshold: int = 10000
    n_atomic_min: int = 25
    n_atomic_max: int = 100
    n_new_atoms: int = 5
    step_feed_ns: int = 999_999_999
    timer_withdraw: int = 1
    step_activator: int = 2

    def __post_init__(self) -> None:
        if self.n_atomic_max <= 0:
            raise ValueError("n_atomic_max must be positive")
        for name in ("n_atoms_init", "n_new_atoms", "energy_consumption", "sim_duration"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


class Outcome(Enum):
    """Why a simulation ended."""

    EXPLODE = 1
    BLACKOUT = 2
    TIMEOUT = 3
    MELTDOWN = 4


@dataclass(frozen=True)
class Stats:
    """A snapshot of the reactor counters."""

    atoms: int
    slots: int
    waste: int
    waste_last: int
    energy: int
    energy_last: int
    splits: int
    splits_last: int
    activations: int
    activations_last: int
    consumed: int
    absorbed: int

    def __str__(self) -> str:
        return "\n".join(
            [
                "----------------------STATISTICHE----------------------",
                f"Numero di atomi:     {self.atoms}",
                f"Scorie totali: {self.waste}, nell'ultimo secondo c'è stato "
                f"un incremento di {self.waste_last} scorie",
                f"Energia totale: {self.energy}, nell'ultimo secondo: {self.energy_last}",
                f"Numero di scissioni: {self.splits}, nell'ultimo secondo ci sono "
                f"stati {self.splits_last} scissioni in più",
                f"Numero di attivazioni: {self.activations}, nell'ultimo secondo ci "
                f"sono state {self.activations_last} attivazioni in più",
                f"Energia consumata: {self.consumed}",
                f"Energia prelevata dall'inibitore: {self.absorbed}",
                f"ENERGIA TOTALE: {self.energy}",
                "-------------------------------------------------------",
            ]
        )


def first_free(pids: Iterable[int]) -> Optional[int]:
    """Return the index of the first free slot, or None if there is none."""
    return next((i for i, pid in enumerate(pids) if pid == FREE), None)


def index_of(pid: int, pids: Iterable[int]) -> Optional[int]:
    """Return the index of the first slot holding ``pid``, or None."""
    return next((i for i, value in enumerate(pids) if value == pid), None)


class PidTable:
    """Slots of atom pids; decayed atoms leave free slots that are reused."""

    def __init__(self, pids: Iterable[int] = ()) -> None:
        self._slots = list(pids)

    def add(self, pid: int) -> int:
        """Store ``pid`` in the first free slot, growing the table if needed.

        Returns the slot index used.
        """
        index = first_free(self._slots)
        if index is None:
            self._slots.append(pid)
            return len(self._slots) - 1
        self._slots[index] = pid
        return index

    def remove(self, pid: int) -> int:
        """Free the slot holding ``pid`` and return its index."""
        index = index_of(pid, self._slots)
        if index is None:
            raise KeyError(pid)
        self._slots[index] = FREE
        return index

    def live(self) -> list[int]:
        """Return the pids of atoms that are still present."""
        return [pid for pid in self._slots if pid != FREE]

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> int:
        return self._slots[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots)


class ReactorState:
    """Counters and pid table shared by every actor of the simulation."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self._lock = threading.RLock()
        self.table = PidTable()
        self.energy = self.config.energy_demand
        self.energy_last = 0
        self.consumed = 0
        self.absorbed = 0
        self.waste = 0
        self.waste_last = 0
        self.splits = 0
        self.splits_last = 0
        self.activations = 0
        self.activations_last = 0

    def register_atom(self, pid: int) -> int:
        """Record a newly created atom without touching the statistics."""
        with self._lock:
            return self.table.add(pid)

    def add_atom(self, pid: int, energy: int) -> int:
        """Record the child of a split and the energy it released."""
        with self._lock:
            index = self.table.add(pid)
            self.energy += energy
            self.energy_last += energy
            self.splits += 1
            self.splits_last += 1
            return index

    def remove_atom(self, pid: int, waste: int) -> int:
        """Turn a decayed atom into waste and free its slot."""
        with self._lock:
            self.waste += waste
            self.waste_last += waste
            return self.table.remove(pid)

    def record_activation(self) -> None:
        with self._lock:
            self.activations += 1
            self.activations_last += 1

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` of energy out of the reactor."""
        with self._lock:
            self.energy -= amount
            self.consumed += amount

    def absorb(self, amount: int) -> None:
        """Account for energy absorbed by the inhibitor."""
        with self._lock:
            self.absorbed += amount

    def check_energy(self) -> Optional[Outcome]:
        """Return EXPLODE or BLACKOUT if the energy is out of bounds, else None."""
        with self._lock:
            outcome = None
            if self.energy > self.config.energy_explode_threshold:
                outcome = Outcome.EXPLODE
            if self.energy < 0:
                outcome = Outcome.BLACKOUT
            return outcome

    def report(self) -> Stats:
        """Return a snapshot and reset the per-second counters."""
        with self._lock:
            stats = Stats(
                atoms=len(self.table.live()),
                slots=len(self.table),
                waste=self.waste,
                waste_last=self.waste_last,
                energy=self.energy,
                energy_last=self.energy_last,
                splits=self.splits,
                splits_last=self.splits_last,
                activations=self.activations,
                activations_last=self.activations_last,
                consumed=self.consumed,
                absorbed=self.absorbed,
            )
            self.waste_last = 0
            self.energy_last = 0
            self.splits_last = 0
            self.activations_last = 0
            return stats