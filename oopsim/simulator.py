"""Discrete-event simulation engine: packets, events and the event loop."""

from __future__ import annotations

import heapq
import itertools
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class Packet:
    """A message travelling from one host to another."""

    source_id: int
    destination_id: int
    message: str


class PacketHandler(Protocol):
    def handle_packet(self, packet: Packet) -> None: ...


class Event(ABC):
    """Something that happens at a fixed point in simulated time."""

    def __init__(self, time: float) -> None:
        self._time = float(time)

    @property
    def time(self) -> float:
        return self._time

    @abstractmethod
    def execute(self, sim: Simulator) -> None:
        """Carry out the event within the given simulator."""


class PacketArrivalEvent(Event):
    """Delivers a packet to a node when simulated time reaches the event."""

    def __init__(self, time: float, packet: Packet, target: PacketHandler) -> None:
        super().__init__(time)
        self.packet = packet
        self.target = target

    def execute(self, sim: Simulator) -> None:
        self.target.handle_packet(self.packet)


class Simulator:
    """Runs scheduled events in order of their time, earliest first."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._current_time = 0.0
        self._queue: list[tuple[float, int, Event]] = []
        self._counter: Iterator[int] = itertools.count()

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def pending(self) -> int:
        """Number of events still waiting to run."""
        return len(self._queue)

    def schedule(self, event: Event) -> None:
        heapq.heappush(self._queue, (event.time, next(self._counter), event))

    def run(self) -> None:
        self.log("Simulation starting...")
        while self._queue:
            time, _, event = heapq.heappop(self._queue)
            self._current_time = time
            event.execute(self)
        self.log("Simulation finished.")

    def log(self, message: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        print(f"[T={self._current_time:6.2f}] {message}", file=out, flush=True)