"""Nodes (hosts and routers) and the network that carries packets between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType

from .simulator import Packet, PacketArrivalEvent, Simulator

LINK_DELAY = 10.0
"""Simulated time a packet takes to cross one link."""

_GATEWAY_ID = 1
_ROUTED_HOST_ID = 2


class Node(ABC):
    """A participant in the network, identified by an integer id."""

    def __init__(self, node_id: int) -> None:
        self.id = node_id
        self.network: Network | None = None

    def _attached(self) -> Network:
        if self.network is None:
            raise RuntimeError(f"node {self.id} is not attached to a network")
        return self.network

    @abstractmethod
    def handle_packet(self, packet: Packet) -> None:
        """React to a packet arriving at this node."""


class Host(Node):
    """An end point that sends and receives messages."""

    def handle_packet(self, packet: Packet) -> None:
        self._attached().log(
            f"Host {self.id} received message: '{packet.message}' "
            f"from Host {packet.source_id}"
        )

    def send(self, destination_id: int, message: str) -> None:
        network = self._attached()
        packet = Packet(self.id, destination_id, message)
        network.log(f"Host {self.id} is sending a packet to Host {destination_id}")
        network.transport_packet(self, _GATEWAY_ID, packet)


class Router(Node):
    """A forwarding device; packets for unknown destinations are dropped."""

    def handle_packet(self, packet: Packet) -> None:
        network = self._attached()
        network.log(
            f"Router {self.id} received a packet for Host {packet.destination_id}"
        )
        if packet.destination_id == _ROUTED_HOST_ID:
            next_hop = _ROUTED_HOST_ID
            network.log(
                f"Router {self.id} is forwarding the packet to Host {next_hop}"
            )
            network.transport_packet(self, next_hop, packet)


class Network:
    """Holds the nodes and links, and moves packets over them."""

    def __init__(self, simulator: Simulator) -> None:
        self.simulator = simulator
        self._nodes: dict[int, Node] = {}
        self._topology: dict[int, int] = {}

    @property
    def nodes(self) -> Mapping[int, Node]:
        return MappingProxyType(self._nodes)

    @property
    def topology(self) -> Mapping[int, int]:
        return MappingProxyType(self._topology)

    def add_node(self, node: Node) -> None:
        self._nodes[node.id] = node
        node.network = self

    def get_node(self, node_id: int) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"no node with id {node_id}") from None

    def connect(self, node1_id: int, node2_id: int) -> None:
        self._topology[node1_id] = node2_id
        self._topology[node2_id] = node1_id

    def transport_packet(self, sender: Node, next_hop_id: int, packet: Packet) -> None:
        receiver = self.get_node(next_hop_id)
        arrival = self.simulator.current_time + LINK_DELAY
        self.simulator.schedule(PacketArrivalEvent(arrival, packet, receiver))

    def log(self, message: str) -> None:
        self.simulator.log(message)