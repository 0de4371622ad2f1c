import pytest

from splice.matrix import Matrix, Matrix22, Matrix33
from splice.vector import Vec2, Vec3


def test_values_are_padded_and_truncated():
    m = Matrix(2, 2, [7])
    assert m.at(0, 0) == 7
    assert m.at(1, 1) == 0
    t = Matrix(1, 2, [1, 2, 3])
    assert list(t) == [1, 2]


def test_at_and_index_agree():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert m.at(1, 0) == m[3]
    assert m.at(0, 2) == m[2]
    with pytest.raises(IndexError):
        m.at(2, 0)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Matrix(0, 2)


def test_add_sub_round_trip():
    a = Matrix22([1, 2, 3, 4])
    b = Matrix22([5, -6, 7, 8])
    assert (a + b) - b == a
    assert (a + 3) - 3 == a
    assert isinstance(a + b, Matrix22)


def test_scalar_mul_div_round_trip():
    a = Matrix33([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert (a * 4) / 4 == a
    assert a * 2 == a + a


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3) * Matrix(2, 3)
    with pytest.raises(ValueError):
        Matrix(2, 3) + Matrix(3, 2)


def test_product_shape_and_identity():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    p = m * Matrix(3, 1, [1, 1, 1])
    assert (p.height, p.width) == (2, 1)
    assert Matrix22.identity() * Matrix22([1, 2, 3, 4]) == Matrix22([1, 2, 3, 4])
    assert Matrix33([2, 0, 1, 3, 4, 5, 6, 7, 8]) * Matrix33.identity() == Matrix33([2, 0, 1, 3, 4, 5, 6, 7, 8])


def test_product_is_associative():
    a = Matrix22([1, 2, 3, 4])
    b = Matrix22([0, -1, 5, 2])
    c = Matrix22([3, 3, -2, 1])
    assert (a * b) * c == a * (b * c)


def test_equality_needs_same_shape():
    assert Matrix(1, 4, [1, 2, 3, 4]) != Matrix(2, 2, [1, 2, 3, 4])
    assert Matrix(2, 2, [1, 2, 3, 4]) == Matrix22([1, 2, 3, 4])


def test_matrix22_rotation_matches_vector_rotation():
    v = Vec2(3.0, -1.0)
    result = Matrix22.rotation(0.8).transform(v)
    expected = v.rotated(0.8)
    assert result.x == pytest.approx(expected.x, abs=1e-9)
    assert result.y == pytest.approx(expected.y, abs=1e-9)
    combined = Matrix22.rotation(0.5) * Matrix22.rotation(0.25)
    assert list(combined) == pytest.approx(list(Matrix22.rotation(0.75)), abs=1e-9)


def test_matrix22_scale():
    v = Vec2(2.0, 5.0)
    s = Vec2(3.0, -0.5)
    assert Matrix22.scale(s).transform(v) == v * s
    assert Matrix22.identity().transform(v) == v


def test_matrix33_translation_and_rotation():
    v = Vec2(1.5, -4.0)
    offset = Vec2(10.0, 2.0)
    assert Matrix33.translation(offset).transform(v) == v + offset
    rotated = Matrix33.rotation_z(1.1).transform(v)
    expected = v.rotated(1.1)
    assert rotated.x == pytest.approx(expected.x, abs=1e-9)
    assert rotated.y == pytest.approx(expected.y, abs=1e-9)
    assert Matrix33.scale(offset).transform(v) == v * offset


def test_matrix33_composition_order():
    v = Vec2(1.0, 2.0)
    offset = Vec2(5.0, -3.0)
    m = Matrix33.translation(offset) * Matrix33.rotation_z(0.4)
    result = m.transform(v)
    expected = v.rotated(0.4) + offset
    assert result.x == pytest.approx(expected.x, abs=1e-9)
    assert result.y == pytest.approx(expected.y, abs=1e-9)


def test_matrix33_transform_vec3():
    v = Vec3(1.0, 2.0, 3.0)
    assert Matrix33.identity().transform(v) == v
    with pytest.raises(TypeError):
        Matrix33.identity().transform((1, 2))