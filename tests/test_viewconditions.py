import pytest

from spectracolor.viewconditions import CIE_HOME_DISPLAY, TM30VC, ViewConditions


def test_defaults():
    vc = ViewConditions()
    assert (vc.yb, vc.f, vc.nc, vc.c, vc.la, vc.dopt) == (20.0, 1.0, 1.0, 0.69, 100.0, None)


def test_k_in_unit_interval_and_decreasing():
    low = ViewConditions(la=16.0)
    high = ViewConditions(la=100.0)
    assert 0.0 < high.k() < low.k() < 1.0


def test_f_l_increases_with_adaptation_luminance():
    values = [ViewConditions(la=la).f_l() for la in (1.0, 16.0, 64.0, 100.0, 1000.0)]
    assert values == sorted(values)
    assert all(v > 0 for v in values)


@pytest.mark.parametrize("dopt,expected", [(1.5, 1.0), (-0.2, 0.0), (0.7, 0.7)])
def test_dd_with_fixed_degree_is_clamped(dopt, expected):
    assert ViewConditions(dopt=dopt).dd() == expected


def test_dd_tm30_is_full_adaptation():
    assert TM30VC.dd() == 1.0


def test_dd_computed_is_bounded_by_f():
    d = CIE_HOME_DISPLAY.dd()
    assert 0.0 <= d <= CIE_HOME_DISPLAY.f


def test_dd_increases_with_luminance():
    assert ViewConditions(la=10.0).dd() < ViewConditions(la=1000.0).dd()


def test_lum_adapt_zero_gives_offset():
    assert ViewConditions().lum_adapt(0.0, 0.26, 150.0) == pytest.approx(0.1)


def test_lum_adapt_continuous_at_lower_bound():
    vc = ViewConditions()
    below = vc.lum_adapt(0.26 - 1e-12, 0.26, 150.0)
    at = vc.lum_adapt(0.26, 0.26, 150.0)
    assert below == pytest.approx(at, rel=1e-9)


def test_lum_adapt_linear_below_lower_bound():
    vc = ViewConditions()
    ql = 0.26
    full = vc.lum_adapt(ql * 0.8, ql, 150.0) - 0.1
    half = vc.lum_adapt(ql * 0.4, ql, 150.0) - 0.1
    assert half == pytest.approx(full / 2.0, rel=1e-12)


def test_lum_adapt_monotonic_in_compression_range():
    vc = ViewConditions()
    values = [vc.lum_adapt(q, 0.26, 150.0) for q in (1.0, 10.0, 50.0, 100.0, 150.0)]
    assert values == sorted(values)
    assert all(v < 400.1 for v in values)


def test_frozen():
    vc = ViewConditions()
    with pytest.raises(AttributeError):
        vc.la = 10.0  # type: ignore[misc]
    assert vc.la == 100.0
    assert vc.k() == pytest.approx(1.0 / 501.0)