import io

import pytest

from oopsim.shapes import Circle, Ellipse, Rectangle, Shape, Square, main, run_demo


def test_shape_ids():
    assert Rectangle(1, 2, "Blue").shape_id() == 0
    assert Square(1, "Red").shape_id() == 1
    assert Circle(1).shape_id() == 2
    assert Ellipse(1, 2).shape_id() == 3


def test_move_updates_coordinate():
    shape = Square(2, "Green")
    assert shape.coordinate() == (0, 0)
    shape.move(1, 2)
    assert shape.coordinate() == (1, 2)


@pytest.mark.parametrize("side", [1, 4, 7])
def test_square_matches_equal_sided_rectangle(side):
    square = Square(side, "Red")
    rect = Rectangle(side, side, "Blue")
    assert square.area() == rect.area()
    assert square.perimeter() == rect.perimeter()
    assert square.is_square()


def test_is_square_follows_changed_sides():
    rect = Rectangle(5, 3, "Blue")
    assert not rect.is_square()
    rect.breadth = 5
    assert rect.is_square()


def test_rectangle_area_uses_updated_sides():
    rect = Rectangle(5, 3, "Blue")
    rect.length = 16
    rect.breadth = 10
    assert rect.area() == Rectangle(16, 10, "Blue").area()
    assert rect.perimeter() == Rectangle(10, 16, "Blue").perimeter()


@pytest.mark.parametrize("radius", [1, 3, 10])
def test_circle_matches_round_ellipse(radius):
    circle = Circle(radius)
    ellipse = Ellipse(radius, radius)
    assert circle.radius() == radius
    assert circle.area() == ellipse.area()
    assert circle.perimeter() == ellipse.perimeter()


def test_circle_area_uses_fixed_pi():
    assert Circle(3).area() == pytest.approx(28.26)


def test_ellipse_perimeter_truncates_mean_square():
    assert Ellipse(1, 2).perimeter() == Ellipse(2, 0).perimeter()


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_run_demo_output():
    out = io.StringIO()
    run_demo(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 8
    assert "square? true" in lines
    assert lines[4] == "28.26"
    assert lines[-2] == "shape_id = 1"
    assert lines[-1] == "position: 1,2"


def test_main_returns_zero(capsys):
    assert main([]) == 0
    assert "square? true" in capsys.readouterr().out