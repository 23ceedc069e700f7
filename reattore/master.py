"""The master: sets up the reactor, drives its actors and decides when it ends."""

from __future__ import annotations

import argparse
import dataclasses
import random
from itertools import count
from typing import Callable, Optional

from .activator import Activator
from .atom import Atom
from .feeder import Feeder
from .inhibitor import Inhibitor
from .state import Config, Outcome, ReactorState, Stats

_NS_PER_SECOND = 1_000_000_000

_MESSAGES = {
    Outcome.EXPLODE: "l'energia totale ha superato il limite massimo",
    Outcome.BLACKOUT: (
        "l'energia totale non è sufficiente per i prossimi prelievi di energia"
    ),
    Outcome.TIMEOUT: "il tempo dedicato alla simulazione è finito",
    Outcome.MELTDOWN: "errore nelle fork dei processi",
}

SUCCESS_MESSAGE = "La simulazione è andata a buon fine senza errori!"


def termination_message(outcome: Outcome) -> str:
    """Return the line that explains why the simulation ended."""
    return f"La simulazione è terminata per il seguente motivo: {_MESSAGES[outcome]}"


class Simulation:
    """A reactor run in simulated time, one tick per energy withdrawal."""

    def __init__(
        self,
        config: Optional[Config] = None,
        use_inhibitor: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or Config()
        self.rng = random.Random(seed)
        self.state = ReactorState(self.config)
        self.inhibitor = Inhibitor(self.state, self.rng) if use_inhibitor else None
        self.atoms: dict[int, Atom] = {}
        self.elapsed = 0
        self.outcome: Optional[Outcome] = None
        self.on_report: Optional[Callable[[Stats], None]] = None
        self._pids = count(1)
        self._feed_clock_ns = 0
        self._activation_clock = 0
        self.feeder = Feeder(self.state, self.config, self.rng, self.spawn)
        self.activator = Activator(self.state, self.rng)
        for _ in range(self.config.n_atoms_init):
            pid = self.spawn(self.rng.randrange(self.config.n_atomic_max))
            self.state.register_atom(pid)

    def spawn(self, atomic_number: int) -> int:
        """Create an atom with ``atomic_number`` and return its pid.

        The atom is not entered in the pid table; whoever spawns it does that.
        """
        pid = next(self._pids)
        self.atoms[pid] = Atom(
            pid, atomic_number, self.state, self.config, self.rng, self.inhibitor
        )
        return pid

    def _activate(self) -> None:
        pid = self.activator.choose_victim()
        if pid is None:
            return
        atom = self.atoms[pid]
        child = atom.activate(next(self._pids))
        if child is not None:
            self.atoms[child.pid] = child
        if not atom.alive:
            del self.atoms[pid]

    def _run_actors(self) -> None:
        step = self.config.timer_withdraw
        self._feed_clock_ns += step * _NS_PER_SECOND
        feed_step = max(self.config.step_feed_ns, 1)
        while self._feed_clock_ns >= feed_step:
            self._feed_clock_ns -= feed_step
            self.feeder.feed()

        self._activation_clock += step
        activation_step = max(self.config.step_activator, 1)
        while self._activation_clock >= activation_step:
            self._activation_clock -= activation_step
            self._activate()

    def tick(self) -> Stats:
        """Advance one withdrawal period and return the statistics of it.

        Sets ``outcome`` to MELTDOWN if an atom could not be created, or to
        EXPLODE or BLACKOUT if the energy left its bounds.
        """
        try:
            self._run_actors()
        except OSError:
            self.outcome = Outcome.MELTDOWN
        self.elapsed += self.config.timer_withdraw
        self.state.withdraw(self.config.energy_consumption)
        stats = self.state.report()
        if self.on_report is not None:
            self.on_report(stats)
        if self.outcome is None:
            self.outcome = self.state.check_energy()
        return stats

    def run(self) -> Outcome:
        """Tick until the energy leaves its bounds or the time runs out."""
        while self.outcome is None:
            if self.elapsed >= self.config.sim_duration:
                self.outcome = Outcome.TIMEOUT
                break
            self.tick()
        return self.outcome


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a nuclear reactor.")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["inibitore"],
        help="start the inhibitor as well",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--duration", type=int, default=None, help="simulated seconds to run"
    )
    args = parser.parse_args(argv)

    config = Config()
    if args.duration is not None:
        config = dataclasses.replace(config, sim_duration=args.duration)

    simulation = Simulation(config, use_inhibitor=args.mode == "inibitore", seed=args.seed)
    simulation.on_report = print
    print(f"Timer avviato per {config.sim_duration} secondi.")
    outcome = simulation.run()
    print(termination_message(outcome))
    print(SUCCESS_MESSAGE)
    return 0