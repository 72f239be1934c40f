import math

import pytest

from fieldsim.vmath import Quat, Vec3

IDENTITY = Quat(1.0, 0.0, 0.0, 0.0)


def _norm(q):
    return math.sqrt(q.w ** 2 + q.x ** 2 + q.y ** 2 + q.z ** 2)


def _components(q):
    return (q.w, q.x, q.y, q.z)


def test_dot_of_orthogonal_vectors_is_zero():
    assert Vec3(1.0, 2.0, 0.0).dot(Vec3(-2.0, 1.0, 5.0)) == 0.0


def test_dot_is_symmetric():
    a, b = Vec3(1.5, -2.0, 3.0), Vec3(0.5, 4.0, -1.0)
    assert a.dot(b) == b.dot(a)


def test_vector_part():
    assert Quat(9.0, 1.0, 2.0, 3.0).vector() == Vec3(1.0, 2.0, 3.0)


def test_identity_is_neutral():
    q = Quat(0.5, -0.5, 0.5, 0.5)
    assert IDENTITY * q == q
    assert q * IDENTITY == q


def test_basis_products_do_not_commute():
    i = Quat(0.0, 1.0, 0.0, 0.0)
    j = Quat(0.0, 0.0, 1.0, 0.0)
    assert i * j == Quat(0.0, 0.0, 0.0, 1.0)
    assert j * i == Quat(0.0, 0.0, 0.0, -1.0)


def test_rotation_keeps_unit_norm():
    q = IDENTITY.rotate(1.2, 0.0, 0.6, 0.8)
    assert _norm(q) == pytest.approx(1.0)


def test_two_half_rotations_equal_one_whole():
    half_twice = IDENTITY.rotate(0.4, 0.0, 0.0, 1.0).rotate(0.4, 0.0, 0.0, 1.0)
    whole = IDENTITY.rotate(0.8, 0.0, 0.0, 1.0)
    assert _components(half_twice) == pytest.approx(_components(whole), abs=1e-12)


def test_rotation_by_zero_is_identity():
    rotated = IDENTITY.rotate(0.0, 1.0, 0.0, 0.0)
    assert _components(rotated) == pytest.approx((1.0, 0.0, 0.0, 0.0), abs=1e-12)


def test_identity_matrix():
    m = IDENTITY.to_matrix()
    for col in range(4):
        for row in range(4):
            assert m[col][row] == (1.0 if col == row else 0.0)


def test_rotation_matrix_is_orthonormal():
    m = IDENTITY.rotate(0.9, 0.36, 0.48, 0.8).to_matrix()
    for a in range(4):
        for b in range(4):
            value = sum(m[a][k] * m[b][k] for k in range(4))
            assert value == pytest.approx(1.0 if a == b else 0.0, abs=1e-12)


def test_matrix_of_inverse_rotation_is_transpose():
    q = IDENTITY.rotate(0.7, 0.0, 1.0, 0.0)
    inverse = Quat(q.w, -q.x, -q.y, -q.z)
    m, mi = q.to_matrix(), inverse.to_matrix()
    for col in range(4):
        for row in range(4):
            assert m[col][row] == pytest.approx(mi[row][col])