"""Command that runs a small host-router-host simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .network import Host, Network, Router
from .simulator import Simulator


def build_demo(out: TextIO | None = None) -> tuple[Simulator, Network]:
    """Build A <-> R <-> B and queue a message from A to B; return the simulator and network."""
    simulator = Simulator(out)
    network = Network(simulator)

    host_a = Host(0)
    network.add_node(host_a)
    network.add_node(Router(1))
    network.add_node(Host(2))

    network.connect(0, 1)
    network.connect(1, 2)

    simulator.log("--- Setting up initial packet send from A to B ---")
    host_a.send(2, "Hello from A!")
    return simulator, network


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oopsim", description="Run a host-router-host packet simulation."
    )
    parser.parse_args(argv)
    simulator, _ = build_demo(sys.stdout)
    simulator.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())