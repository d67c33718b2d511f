# oopsim

Two small object-oriented models packaged together:

- **A discrete-event network simulator** (`oopsim.simulator`, `oopsim.network`).
  Hosts and routers pass packets across a network, and events are processed in
  time order. Each hop takes `LINK_DELAY` (10.0) time units.
- **A family of 2D shapes** (`oopsim.shapes`). Rectangles, squares, ellipses
  and circles, each with an area, a perimeter, a position and a numeric shape id.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The network simulator

Run the built-in demo, where host A (id 0) sends a message through router R
(id 1) to host B (id 2):

```
oopsim
```

Each log line is stamped with the current simulation time:

```
[T=  0.00] --- Setting up initial packet send from A to B ---
[T=  0.00] Host 0 is sending a packet to Host 2
[T=  0.00] Simulation starting...
[T= 10.00] Router 1 received a packet for Host 2
[T= 10.00] Router 1 is forwarding the packet to Host 2
[T= 20.00] Host 2 received message: 'Hello from A!' from Host 0
[T= 20.00] Simulation finished.
```

You can build the same setup yourself:

```python
from oopsim.simulator import Simulator
from oopsim.network import Network, Host, Router

sim = Simulator()          # logs to stdout; pass a text stream to redirect
net = Network(sim)
host_a, router, host_b = Host(0), Router(1), Host(2)
for node in (host_a, router, host_b):
    net.add_node(node)
net.connect(0, 1)
net.connect(1, 2)

host_a.send(2, "Hello from A!")
sim.run()
```

Pieces of the API:

- `Simulator.schedule(event)` accepts any `Event` subclass; `run()` executes
  events earliest first (events with equal times run in the order they were
  scheduled). `current_time` and `pending` report the clock and the queue size.
- `Network.transport_packet(sender, next_hop_id, packet)` schedules a
  `PacketArrivalEvent` that hands the `Packet` to the next hop's
  `handle_packet` after `LINK_DELAY`.
- `Network.get_node` raises `KeyError` for an unknown id; `Host.send` and the
  nodes' `handle_packet` raise `RuntimeError` if the node was never added to a
  network. `Network.nodes` and `Network.topology` are read-only views.
- `oopsim.cli.build_demo(out)` returns the simulator and network for the demo
  above, with the first packet already queued, ready to `run()`.

## Shapes

Run the shapes demo:

```
oopsim-shapes
```

which prints:

```
160
2,3
25
square? true
28.26
4
shape_id = 1
position: 1,2
```

Use the classes directly:

```python
from oopsim.shapes import Rectangle, Square, Circle, Ellipse

r = Rectangle(16, 10, "Blue")
r.area()          # 160.0
r.perimeter()     # 52.0
r.is_square()     # False
r.move(2, 3)
r.coordinate()    # (2, 3)

Square(5, "Red").shape_id()   # 1
Circle(3).radius()            # 3
Ellipse(4, 2).area()          # 25.12 (pi is taken as 3.14)
```

Shape ids: rectangle `0`, square `1`, circle `2`, ellipse `3`.

`Ellipse.perimeter()` uses `2 * 3.14 * sqrt((a² + b²) // 2)`, with the mean of
the squared axes rounded down to a whole number.

## What it does not do

- Routing is fixed, not computed: a `Host` always sends through node 1, and a
  `Router` forwards only packets addressed to node 2, silently dropping the rest.
  `Network.connect` records links in `topology`, but nothing consults them.
- Shapes are not drawn; there is no window or canvas to display them on.