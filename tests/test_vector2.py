import math

import pytest

from blockmaze.vector2 import Vector2, circle_hit


def test_size_of_three_four_triangle():
    assert Vector2(3, 4).size() == pytest.approx(5.0)


def test_size_of_zero_vector_is_zero():
    assert Vector2().size() == 0


def test_add_and_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(-7.25, 3.5)
    assert (a + b) - b == a


def test_add_is_componentwise():
    a = Vector2(1.0, 2.0)
    b = Vector2(10.0, 20.0)
    result = a + b
    assert (result.x, result.y) == (a.x + b.x, a.y + b.y)


def test_scale_then_inverse_scale_returns_original():
    v = Vector2(2.0, -8.0)
    back = v.scale(4.0).scale(0.25)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_scale_multiplies_length():
    v = Vector2(3.0, 4.0)
    assert v.scale(3.0).size() == pytest.approx(v.size() * 3.0)


@pytest.mark.parametrize("x, y", [(3, 4), (-1, 0), (0.1, -0.2), (100, 7)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    v = Vector2(x, y)
    n = v.normalized()
    assert n.size() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(v.y, v.x))


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(0, 0).normalized()


def test_add_with_other_type_raises():
    with pytest.raises(TypeError):
        Vector2(1, 1) + 3


def test_circle_hit_inside_radius():
    assert circle_hit(Vector2(0, 0), Vector2(1, 1), 2.0) is True


def test_circle_hit_outside_radius():
    assert circle_hit(Vector2(0, 0), Vector2(10, 0), 2.0) is False


def test_circle_hit_at_exact_radius_is_not_a_hit():
    assert circle_hit(Vector2(0, 0), Vector2(3, 4), 5.0) is False


def test_circle_hit_is_symmetric():
    a = Vector2(1.0, 2.0)
    b = Vector2(2.5, 3.0)
    assert circle_hit(a, b, 2.0) == circle_hit(b, a, 2.0)