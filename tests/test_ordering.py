import pytest

from cubestructs.cube import Cube
from cubestructs.ordering import my_max


def test_integers():
    assert my_max(3, 5) == 5
    assert my_max(5, 3) == 5


def test_characters():
    assert my_max("a", "d") == "d"


def test_strings():
    assert my_max("Hello", "World") == "World"


def test_cubes():
    result = my_max(Cube(3), Cube(6))
    assert result.length == 6
    assert str(result) == "Cube(6)"


def test_equal_values_return_second():
    first = Cube(2)
    second = Cube(2)
    assert my_max(first, second) is second


def test_incomparable_values_raise():
    with pytest.raises(TypeError):
        my_max(1, "a")