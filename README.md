# warehouse_sim

A discrete-event simulation of packages that move through a network of warehouses.

Each warehouse has one LIFO section for every other warehouse. A package takes the
shortest route to its destination. The route comes from a breadth-first search
over the adjacency matrix. At each warehouse the package waits in the section for
its next hop.

A transport runs along each link at a fixed interval. It picks the oldest packages
in the section, up to its capacity, and breaks ties by package id. To reach those
packages it pops items off the stack, and each removal adds the removal cost to
the clock. Of the packages it removed, the ones it did not pick go back on the
stack. The picked packages arrive at the next warehouse after the latency. The
simulation ends when every package has been delivered. A package whose
destination cannot be reached is dropped quietly.

## Installation

```
pip install .
```

## Command line

```
warehouse-sim input.txt
```

The log goes to standard output. The exit status is 1, with a message on standard
error, in these cases:

- no file is given;
- the file cannot be opened;
- the input ends early;
- the input holds a value that is not an integer where one is expected;
- a package names a warehouse that does not exist.

## Input format

All values are separated by whitespace:

```
<capacity> <latency> <transport interval> <removal cost>
<number of warehouses N>
<N x N adjacency matrix; a 1 marks a link>
<number of packages>
<time> pac <id> org <origin> dst <destination>   (one line per package)
```

The words `pac`, `org` and `dst` and the id given in the input are read but not
used. Packages get ids in the order they appear, starting at 0.

If N is 0 or less, the rest of the input is ignored and nothing happens.

The first transports on every link start at the time of the first arrival plus
the transport interval.

## Output

Each line starts with the time as seven zero-padded digits. Ids and warehouse
numbers are padded to three digits:

```
0000010 pacote 000 armazenado em 000 na secao 001
0000120 pacote 000 removido de 000 na secao 001
0000120 pacote 000 em transito de 000 para 001
0000120 pacote 003 rearmazenado em 000 na secao 001
0000140 pacote 000 entregue em 001
```

## Library use

```python
import io
from warehouse_sim.simulation import Simulation, SimulationError, find_route

out = io.StringIO()
with open("input.txt") as fh:
    Simulation(fh.read(), out).run()
print(out.getvalue())

# Or load the file directly (raises SimulationError if it cannot be read):
Simulation.from_file("input.txt", out).run()

# Shortest route over an adjacency matrix, both ends included:
find_route([[0, 1], [1, 0]], 0, 1)   # [0, 1]
```

If you leave out `out`, the log goes to standard output.

The building blocks live in two modules.

`warehouse_sim.events` has:

- `EventKind`: arrivals come before transports at the same time.
- `Package`
- `Event`
- `EventQueue`: a bounded min-priority queue. An event pushed while the queue is
  full is dropped: `push` returns `False` and prints a warning on standard error.

`warehouse_sim.warehouse` has `Warehouse`, which offers `store`, `section` and
`is_empty`.

## Tests

```
pip install .[test]
pytest
```