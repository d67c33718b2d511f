"""Simple geometric shapes with a position, area and perimeter."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

_PI = 3.14


def _fmt(value: float) -> str:
    return f"{value:g}"


class Shape(ABC):
    """A shape placed at integer coordinates."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0

    def move(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def coordinate(self) -> tuple[int, int]:
        return (self.x, self.y)

    @abstractmethod
    def area(self) -> float: ...

    @abstractmethod
    def perimeter(self) -> float: ...

    @abstractmethod
    def shape_id(self) -> int: ...


class Rectangle(Shape):
    def __init__(self, length: int, breadth: int, color: str) -> None:
        super().__init__()
        self.length = length
        self.breadth = breadth
        self.color = color

    def area(self) -> float:
        return float(self.length * self.breadth)

    def perimeter(self) -> float:
        return float(2 * (self.length + self.breadth))

    def is_square(self) -> bool:
        return self.length == self.breadth

    def shape_id(self) -> int:
        return 0


class Square(Rectangle):
    def __init__(self, length: int, color: str) -> None:
        super().__init__(length, length, color)

    def shape_id(self) -> int:
        return 1


class Ellipse(Shape):
    def __init__(self, x_length: int, y_length: int) -> None:
        super().__init__()
        self.x_length = x_length
        self.y_length = y_length

    def area(self) -> float:
        return _PI * self.x_length * self.y_length

    def perimeter(self) -> float:
        # The mean of the squared axes is taken in whole numbers.
        mean_square = (self.x_length**2 + self.y_length**2) // 2
        return 2 * _PI * math.sqrt(mean_square)

    def shape_id(self) -> int:
        return 3


class Circle(Ellipse):
    def __init__(self, radius: int) -> None:
        super().__init__(radius, radius)

    def shape_id(self) -> int:
        return 2

    def radius(self) -> int:
        return self.x_length


def run_demo(out: TextIO | None = None) -> None:
    """Exercise the shapes and print the results."""
    out = out if out is not None else sys.stdout

    r1 = Rectangle(5, 3, "Blue")
    r1.breadth = 10
    r1.length = 16
    print(_fmt(r1.area()), file=out)
    r1.move(2, 3)
    print("{},{}".format(*r1.coordinate()), file=out)

    s1 = Square(5, "Red")
    print(_fmt(s1.area()), file=out)
    print(f"square? {'true' if s1.is_square() else 'false'}", file=out)

    c1 = Circle(3)
    print(_fmt(c1.area()), file=out)

    shape: Shape = Square(2, "Green")
    print(_fmt(shape.area()), file=out)
    shape.move(1, 2)
    print(f"shape_id = {shape.shape_id()}", file=out)
    print(f"position: {shape.x},{shape.y}", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())