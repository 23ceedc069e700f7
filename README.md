# reattore

A small simulation of a fission reactor. It runs in simulated time, in a single process.

## How it works

The reactor starts with `Config.n_atoms_init` atoms and `Config.energy_demand` units of energy. Each atom gets a random atomic number below `Config.n_atomic_max`.

One tick covers one withdrawal period, `Config.timer_withdraw` simulated seconds. Each tick runs these steps in order:

1. **Feeder.** Every `Config.step_feed_ns` simulated nanoseconds, the feeder (`reattore.feeder.Feeder`) adds `Config.n_new_atoms` fresh atoms.
2. **Activator.** Every `Config.step_activator` seconds, the activator (`reattore.activator.Activator`) picks a random slot of the pid table. If an atom lives in that slot, the activation is counted and the atom acts:
   - If its atomic number is above `Config.n_atomic_min`, it splits (`reattore.atom.Atom`). The split creates a child atom and releases `child * parent - max(child, parent)` energy.
   - Otherwise it decays, and its atomic number is added to the waste.
3. **Withdrawal.** The master takes `Config.energy_consumption` energy out of the reactor.
4. **Statistics.** The master reports statistics and resets the per-second counters.

You can also turn on the inhibitor (`reattore.inhibitor.Inhibitor`). It answers every split request. Each answer absorbs 10 energy, which is subtracted from that split's released energy. Each answer also allows or vetoes the split at random. On a veto, the parent's atomic number still drops, but no child is created.

The run ends with one of the outcomes of `reattore.state.Outcome`:

- `EXPLODE`: the total energy rose above `Config.energy_explode_threshold`.
- `BLACKOUT`: the total energy fell below zero.
- `TIMEOUT`: `Config.sim_duration` simulated seconds have passed.
- `MELTDOWN`: creating an atom raised `OSError`.

## Installation

```
pip install .
```

## Usage

```
reattore
```

To run with the inhibitor:

```
reattore inibitore
```

Options:

- `--seed N`: seed the random number generator so that a run can be repeated.
- `--duration N`: simulated seconds to run. The default is 100.

The command prints the output in Italian, in this order:

1. A start line.
2. One statistics block per tick. The block shows:
   - atoms
   - total waste and waste since the last tick
   - total energy and energy since the last tick
   - splits
   - activations
   - consumed energy
   - energy absorbed by the inhibitor
3. The reason the run ended.

## Library use

```python
from reattore.master import Simulation, termination_message
from reattore.state import Config

sim = Simulation(Config(sim_duration=20), use_inhibitor=True, seed=42)
sim.on_report = print          # called with a Stats snapshot every tick
outcome = sim.run()
print(termination_message(outcome))
```

`Simulation.tick()` advances a single period and returns its `Stats`.

`reattore.state` holds the shared pieces:

- `Config`: every tunable limit.
- `ReactorState`: the counters, with `withdraw`, `absorb`, `check_energy` and `report`.
- `PidTable`: the atom slots. A decayed atom leaves a free slot, which is reused later.
- `Stats`: a snapshot whose `str()` is the statistics block.

## What it does not do

Actors do not run as separate processes, and ticks do not wait in real time. A whole run completes as fast as the computer allows. There is no persistence: state lives only for the duration of a run.

## Running the tests

```
pip install .[test]
pytest
```