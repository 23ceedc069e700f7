import random

import pytest

from reattore.atom import Atom, released_energy
from reattore.inhibitor import Inhibitor
from reattore.state import Config, ReactorState


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value if self.value < stop else stop - 1


class StubInhibitor:
    def __init__(self, allowed, energy=10):
        from reattore.inhibitor import Decision

        self.decision = Decision(energy=energy, allowed=allowed)
        self.calls = 0

    def regulate(self):
        self.calls += 1
        return self.decision


def make_atom(number, rng=None, inhibitor=None, pid=100):
    state = ReactorState()
    state.register_atom(pid)
    atom = Atom(pid, number, state, rng=rng or random.Random(1), inhibitor=inhibitor)
    return state, atom


def test_released_energy_worked_example():
    assert released_energy(2, 3) == 3


def test_released_energy_symmetric():
    assert released_energy(7, 11, 0) == released_energy(11, 7, 0)


def test_released_energy_subtracts_absorbed():
    assert released_energy(9, 20, 0) - released_energy(9, 20, 4) == 4


def test_can_split_threshold():
    config = Config()
    state = ReactorState(config)
    assert not Atom(1, config.n_atomic_min, state).can_split()
    assert Atom(1, config.n_atomic_min + 1, state).can_split()


def test_split_conserves_atomic_number():
    state, atom = make_atom(40, rng=FixedRng(10))
    child = atom.split(200)
    assert child.atomic_number + atom.atomic_number == 40
    assert child.pid == 200
    assert 200 in state.table.live()
    assert state.splits == 1


def test_split_adds_released_energy():
    state, atom = make_atom(60, rng=random.Random(5))
    before = state.energy
    child = atom.split(201)
    assert state.energy - before == released_energy(child.atomic_number, atom.atomic_number)


def test_vetoed_split_reduces_parent_but_records_nothing():
    inhibitor = StubInhibitor(allowed=False)
    state, atom = make_atom(50, rng=FixedRng(20), inhibitor=inhibitor)
    assert atom.split(300) is None
    assert atom.atomic_number == 30
    assert state.splits == 0
    assert 300 not in state.table.live()
    assert inhibitor.calls == 1


def test_allowed_split_subtracts_absorbed_energy():
    inhibitor = StubInhibitor(allowed=True, energy=10)
    state, atom = make_atom(50, rng=FixedRng(20), inhibitor=inhibitor)
    before = state.energy
    child = atom.split(301)
    assert state.energy - before == released_energy(child.atomic_number, atom.atomic_number) - 10
    assert child.inhibitor is inhibitor


def test_real_inhibitor_records_absorption():
    state = ReactorState()
    state.register_atom(1)
    inhibitor = Inhibitor(state, random.Random(0))
    atom = Atom(1, 90, state, rng=random.Random(0), inhibitor=inhibitor)
    atom.split(2)
    assert state.absorbed == inhibitor.energy


def test_decay_turns_atom_into_waste():
    state, atom = make_atom(12)
    index = atom.decay()
    assert state.table[index] == -1
    assert state.waste == 12
    assert not atom.alive


def test_decay_twice_raises():
    _, atom = make_atom(12)
    atom.decay()
    with pytest.raises(RuntimeError):
        atom.decay()


def test_activate_low_atom_decays():
    state, atom = make_atom(Config().n_atomic_min)
    assert atom.activate(500) is None
    assert state.table.live() == []
    assert state.waste == Config().n_atomic_min


def test_activate_high_atom_splits():
    state, atom = make_atom(80, rng=FixedRng(30))
    child = atom.activate(501)
    assert child.atomic_number == 30
    assert atom.alive
    assert sorted(state.table.live()) == [100, 501]


def test_decayed_slot_is_reused_by_split_child():
    state = ReactorState()
    state.register_atom(1)
    state.register_atom(2)
    low = Atom(1, 5, state)
    high = Atom(2, 70, state, rng=FixedRng(10))
    low.decay()
    high.split(3)
    assert list(state.table) == [3, 2]