"""Tests for viewport fitting."""

import pytest

from connect4_tui.core.geometry import Rect, fit, fit_ratio, inset

VIEWPORTS = [
    Rect(0, 0, w, h)
    for w in (0, 1, 3, 7, 13, 40, 80, 140, 211)
    for h in (0, 1, 3, 6, 11, 24, 42, 60)
] + [Rect(5, 2, 100, 30), Rect(-10, -4, 77, 19)]

RATIOS = [0.25, 1.0, 7 / 6, 2.333, 7.0 / 6.0 / 0.18, 20.0]


@pytest.mark.parametrize("available", VIEWPORTS)
@pytest.mark.parametrize("ratio", RATIOS)
def test_fit_is_contained_and_snapped(available, ratio):
    out = fit(available, 7, 6, ratio)
    if out.width == 0 or out.height == 0:
        assert out == Rect(available.x, available.y, 0, 0)
        return
    assert available.contains(out)
    assert out.width % 7 == 0
    assert out.height % 6 == 0


@pytest.mark.parametrize("available", VIEWPORTS)
def test_fit_is_deterministic(available):
    assert fit(available, 7, 6, 2.0) == fit(available, 7, 6, 2.0)


def test_wide_terminal():
    available = Rect(0, 0, 140, 42)
    out = fit(available, 7, 6, 7.0 / 6.0 / 0.18)
    assert out.width % 7 == 0 and out.height % 6 == 0
    assert available.contains(out)

    left = out.x - available.x
    right = available.right - out.right
    top = out.y - available.y
    bottom = available.bottom - out.bottom
    assert abs(left - right) <= 1
    assert abs(top - bottom) <= 1
    assert out == Rect(0, 12, 140, 18)


def test_height_limited_fit():
    out = fit(Rect(0, 0, 200, 12), 7, 6, 7 / 6)
    # 12 * 7/6 = 14 -> 14 wide, 12 tall
    assert out == Rect(93, 0, 14, 12)


def test_odd_leftover_biased_top_left():
    out = fit(Rect(0, 0, 15, 7), 7, 6, 7 / 6)
    assert (out.width, out.height) == (7, 6)
    assert (out.x, out.y) == (4, 0)


def test_too_small_viewport_is_empty():
    assert fit(Rect(0, 0, 3, 3), 7, 6, 7 / 6) == Rect(0, 0, 0, 0)


def test_zero_size_keeps_origin():
    assert fit(Rect(4, 9, 0, 20), 7, 6, 1.0) == Rect(4, 9, 0, 0)
    assert fit(Rect(4, 9, 20, 0), 7, 6, 1.0) == Rect(4, 9, 0, 0)


@pytest.mark.parametrize("cols,rows,ratio", [(0, 6, 1.0), (7, 0, 1.0), (7, 6, 0.0), (7, 6, -1.0)])
def test_bad_grid_arguments_raise(cols, rows, ratio):
    with pytest.raises(ValueError):
        fit(Rect(0, 0, 10, 10), cols, rows, ratio)


def test_fit_ratio_accounts_for_cell_shape():
    assert fit_ratio(7, 6, 0.5) == pytest.approx(7 / 3)
    assert fit_ratio(7, 7, 1.0) == 1.0


def test_inset():
    assert inset(Rect(0, 0, 10, 8), 1) == Rect(1, 1, 8, 6)
    assert inset(Rect(0, 0, 2, 8), 1).is_empty


def test_rect_helpers():
    r = Rect(2, 3, 4, 5)
    assert (r.right, r.bottom) == (6, 8)
    assert not r.is_empty
    assert Rect().is_empty
    assert r.contains(Rect(2, 3, 4, 5))
    assert not r.contains(Rect(1, 3, 4, 5))


@pytest.mark.parametrize(
    "available,ratio",
    [
        (Rect(0, 0, 35, 30), 7 / 6),
        (Rect(0, 0, 70, 60), 7 / 6),
        (Rect(0, 0, 140, 120), 7 / 6),
        (Rect(0, 0, 70, 30), 7 / 3),
        (Rect(3, 2, 35, 30), 7 / 6),
    ],
)
def test_exact_fit_keeps_every_row(available, ratio):
    assert fit(available, 7, 6, ratio) == available
