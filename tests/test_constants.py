from __future__ import annotations

import astropy.constants as const
import numpy as np
import pytest

from planckwave.constants import C1, C1L, C2, b_wien, c, h, k_B


def test_fundamental_constants():
    assert h == pytest.approx(const.h.si.value, rel=1e-9)
    assert c == pytest.approx(const.c.si.value, rel=1e-9)
    assert k_B == pytest.approx(const.k_B.si.value, rel=1e-9)


def test_radiation_constants():
    assert C1 == 3.741771790075259e-16
    assert C2 == 1.43877735382772e-2

    assert C1 == pytest.approx(2 * np.pi * const.h.si.value * const.c.si.value**2, rel=1e-6)
    assert C1L == pytest.approx(2 * const.h.si.value * const.c.si.value**2, rel=1e-6)
    assert C2 == pytest.approx(const.h.si.value * const.c.si.value / const.k_B.si.value, rel=1e-6)


def test_wien_constant():
    # x = hc / λkT at the peak solves x = 5 (1 - e^-x)
    x = C2 / b_wien
    assert x == pytest.approx(5 * -np.expm1(-x), rel=1e-6)
