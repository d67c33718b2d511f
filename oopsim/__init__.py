"""A small discrete-event network simulator and a set of geometric shapes."""

__version__ = "0.1.0"
__all__ = ["cli", "network", "shapes", "simulator"]