"""
Tests for string rendering.
"""

from densematrix import Matrix


class TestStr:

    def test_two_by_two(self, m22):
        assert str(m22) == "{[1.0, 2.0],[3.0, 4.0]}"

    def test_single_entry(self):
        assert str(Matrix(1, 1)) == "{[1.0]}"

    def test_rectangular(self):
        assert str(Matrix(2, 3)) == "{[1.0, 0.0, 0.0],[0.0, 1.0, 0.0]}"

    def test_single_column(self):
        assert str(Matrix(3, 1, [1, 2, 3])) == "{[1.0],[2.0],[3.0]}"

    def test_shortest_float32_repr(self):
        assert str(Matrix(1, 2, [0.1, -0.25])) == "{[0.1, -0.25]}"

    def test_inverse(self, m22):
        assert str(m22.invert()) == "{[-2.0, 1.0],[1.5, -0.5]}"


class TestRepr:

    def test_repr(self):
        assert repr(Matrix(1, 1)) == "Matrix(rows=1, columns=1, values={[1.0]})"
