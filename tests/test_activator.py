import random

from reattore.activator import Activator
from reattore.state import ReactorState


def _state_with(pids):
    state = ReactorState()
    for pid in pids:
        state.register_atom(pid)
    return state


def test_empty_table_yields_no_victim():
    state = ReactorState()
    assert Activator(state, random.Random(0)).choose_victim() is None
    assert state.activations == 0


def test_victim_is_a_live_atom_and_counts_activation():
    state = _state_with([11, 12, 13])
    victim = Activator(state, random.Random(3)).choose_victim()
    assert victim in (11, 12, 13)
    assert state.activations == 1
    assert state.activations_last == 1


def test_free_slot_yields_no_victim():
    state = _state_with([5])
    state.remove_atom(5, 0)
    activator = Activator(state, random.Random(0))
    assert activator.choose_victim() is None
    assert state.activations == 0


def test_activations_match_victims_over_many_rounds():
    state = _state_with([1, 2, 3, 4])
    state.remove_atom(2, 0)
    state.remove_atom(4, 0)
    activator = Activator(state, random.Random(9))
    victims = [activator.choose_victim() for _ in range(200)]
    chosen = [v for v in victims if v is not None]
    assert set(chosen) <= {1, 3}
    assert state.activations == len(chosen)
    assert 0 < len(chosen) < 200


def test_report_resets_last_second_activations():
    state = _state_with([7])
    Activator(state, random.Random(0)).choose_victim()
    stats = state.report()
    assert stats.activations == 1
    assert stats.activations_last == 1
    assert state.activations_last == 0


def test_same_seed_gives_same_victims():
    pids = list(range(100, 120))
    a = Activator(_state_with(pids), random.Random(5))
    b = Activator(_state_with(pids), random.Random(5))
    assert [a.choose_victim() for _ in range(10)] == [b.choose_victim() for _ in range(10)]