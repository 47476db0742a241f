import sys

import pytest

from spectracolor.xyz import XYZ, XYZ_D65, XYZ_D65WHITE, Observer, XYZError

EPS = sys.float_info.epsilon


def test_ulps_xyz():
    xyz0 = XYZ((0.0, 0.0, 0.0), None, Observer.STD1931)
    xyz1 = XYZ((0.0, 0.0, EPS), None, Observer.STD1931)
    assert xyz0.isclose(xyz1, 1e-5)
    xyz2 = XYZ((0.0, 0.0, 2.0 * EPS), None, Observer.STD1931)
    assert not xyz0.isclose(xyz2)
    xyz3 = XYZ((0.0, 0.0, 0.0), None, Observer.STD1964)
    assert not xyz0.isclose(xyz3)


def test_isclose_stimulus_presence_must_match():
    assert not XYZ_D65.isclose(XYZ_D65WHITE, 1.0)
    assert XYZ_D65WHITE.isclose(XYZ_D65WHITE)


def test_from_chromaticity_roundtrip():
    xyz = XYZ.from_chromaticity(0.31272, 0.32903)
    x, y = xyz.chromaticity()
    assert x == pytest.approx(0.31272)
    assert y == pytest.approx(0.32903)
    assert xyz.luminous_value() == pytest.approx(100.0)
    assert xyz.xyz is None
    assert xyz.observer is Observer.STD1931


def test_from_chromaticity_with_luminance_and_observer():
    xyz = XYZ.from_chromaticity(0.3, 0.4, 50.0, Observer.STD2015)
    assert xyz.luminous_value() == pytest.approx(50.0)
    assert xyz.observer is Observer.STD2015


def test_from_chromaticity_invalid():
    with pytest.raises(XYZError):
        XYZ.from_chromaticity(0.6, 0.4)
    with pytest.raises(XYZError):
        XYZ.from_chromaticity(0.7, 0.5)


def test_from_luv60_roundtrip():
    ref = XYZ.from_chromaticity(0.44, 0.40)
    u, v = ref.uv60()
    back = XYZ.from_luv60(u, v)
    assert back.isclose(ref, 1e-9)


def test_try_add_illuminants():
    a = XYZ((1.0, 2.0, 3.0))
    b = XYZ((4.0, 5.0, 6.0))
    assert a.try_add(b) == XYZ((5.0, 7.0, 9.0))


def test_try_add_errors():
    a = XYZ((1.0, 2.0, 3.0))
    with pytest.raises(XYZError):
        a.try_add(XYZ((1.0, 2.0, 3.0), None, Observer.STD1964))
    with pytest.raises(XYZError):
        a.try_add(XYZ((1.0, 2.0, 3.0), (0.5, 0.5, 0.5)))


def test_values_normalized_to_white():
    xyz = XYZ((50.0, 200.0, 100.0), (20.0, 40.0, 60.0))
    assert xyz.values() == pytest.approx((10.0, 20.0, 30.0))
    assert xyz.luminous_value() == 40.0
    assert XYZ_D65.values() == pytest.approx((95.04, 100.0, 108.86))


def test_set_illuminance_scales_both():
    xyz = XYZ((50.0, 200.0, 100.0), (20.0, 40.0, 60.0)).set_illuminance(100.0)
    assert xyz.xyzn == pytest.approx((25.0, 100.0, 50.0))
    assert xyz.xyz == pytest.approx((10.0, 20.0, 30.0))


def test_chromaticity_invariant_under_scaling():
    a = XYZ((95.04, 100.0, 108.86))
    b = a.set_illuminance(3.0)
    assert b.chromaticity() == pytest.approx(a.chromaticity())


def test_uvprime_relates_to_uv60():
    xyz = XYZ((30.0, 40.0, 50.0))
    u60, v60 = xyz.uv60()
    u, v = xyz.uvprime()
    assert u == pytest.approx(u60)
    assert v == pytest.approx(1.5 * v60)


def test_uv_prime_distance():
    a = XYZ.from_chromaticity(0.3, 0.3)
    b = XYZ.from_chromaticity(0.35, 0.32)
    assert a.uv_prime_distance(a) == 0.0
    assert a.uv_prime_distance(b) == pytest.approx(b.uv_prime_distance(a))
    assert a.uv_prime_distance(b) > 0.0


def test_uvw64_relative_to_self():
    xyz = XYZ((30.0, 64.0, 50.0))
    uu, vv, ww = xyz.uvw64(xyz)
    assert uu == 0.0
    assert vv == 0.0
    assert ww == pytest.approx(83.0)


def test_mul_scales():
    xyz = XYZ((1.0, 2.0, 3.0), (0.5, 1.0, 1.5))
    for scaled in (xyz * 2.0, 2.0 * xyz):
        assert scaled.xyzn == (2.0, 4.0, 6.0)
        assert scaled.xyz == (1.0, 2.0, 3.0)


def test_add_cases():
    a = XYZ((1.0, 2.0, 3.0))
    b = XYZ((10.0, 20.0, 30.0))
    assert a + b == XYZ((11.0, 22.0, 33.0))

    sa = XYZ((1.0, 2.0, 3.0), (0.1, 0.2, 0.3))
    sb = XYZ((10.0, 20.0, 30.0), (1.0, 2.0, 3.0))
    total = sa + sb
    assert total.xyzn == pytest.approx((11.0, 22.0, 33.0))
    assert total.xyz == pytest.approx((1.1, 2.2, 3.3))

    mixed = a + sb
    assert mixed.xyz is None
    assert mixed.xyzn == pytest.approx((2.0, 4.0, 6.0))

    mixed2 = sa + b
    assert mixed2.xyz is None
    assert mixed2.xyzn == pytest.approx((10.1, 20.2, 30.3))


def test_add_different_observers_raises():
    with pytest.raises(XYZError):
        XYZ((1.0, 1.0, 1.0)) + XYZ((1.0, 1.0, 1.0), None, Observer.STD2015_10)