#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the arithmetic support of plain and unit carrying quantities

.. codeauthor: Michael J. Hayford
"""

import math
import pytest
import astropy.units as u

from raytransfer.exceptions import DomainError
from raytransfer.util.numeric import (is_dimensionless, same_dimension,
                                      check_dimensionless,
                                      check_same_dimension, check_angle,
                                      is_length, check_length,
                                      zero, zero_inverse, one, isapprox)


def test_dimension_checks():
    assert is_dimensionless(1.5)
    assert is_dimensionless(1 + 2j)
    assert is_dimensionless(3*u.mm/(2*u.m))
    assert not is_dimensionless(3*u.mm)

    assert same_dimension(1*u.mm, 2*u.km)
    assert not same_dimension(1*u.mm, 2*u.s)
    assert not same_dimension(1*u.mm, 2.0)
    # a dimensionless zero fits any dimension
    assert same_dimension(0.0, 2*u.m)
    assert same_dimension(0j, 2*u.m)

    with pytest.raises(DomainError):
        check_dimensionless(1*u.m, 'n')
    with pytest.raises(DomainError):
        check_same_dimension(1*u.m, 1/(1*u.m), 'z')
    assert check_same_dimension(1*u.m, 1*u.nm, 'z') == 1*u.m


def test_check_angle():
    assert check_angle(0.1, 'aoi') == 0.1
    assert check_angle(10*u.deg, 'aoi') == 10*u.deg
    with pytest.raises(DomainError):
        check_angle(1*u.m, 'aoi')
    with pytest.raises(DomainError):
        check_angle('ten degrees', 'aoi')


def test_zero_and_one():
    assert zero(2.5) == 0
    assert zero(math.inf) == 0
    assert zero(3*u.mm).unit == u.mm
    assert zero(3*u.mm) == 0
    assert zero(math.inf*u.mm).unit == u.mm
    assert zero_inverse(0*u.mm).unit.is_equivalent(u.m**-1)
    assert zero_inverse(0*u.mm) == 0
    assert one(4*u.mm) == 1
    assert is_dimensionless(one(4*u.mm))


def test_isapprox():
    assert isapprox(1.0, 1.0 + 1e-12)
    assert not isapprox(1.0, 1.1)
    assert isapprox(1.0, 1.1, rtol=0.1)
    assert isapprox(math.inf, math.inf)
    assert not isapprox(math.inf, 1e300)
    assert isapprox(1*u.m, 1000*u.mm)
    assert not isapprox(1*u.m, 1*u.s)
    assert isapprox(0.0, 1e-9, atol=1e-8)


def test_lengths():
    assert is_length(2.5)
    assert is_length(math.inf)
    assert is_length(3*u.mm)
    assert is_length(math.inf*u.km)
    assert not is_length(3*u.s)
    assert not is_length(3/u.mm)
    assert check_length(3*u.mm, 'L') == 3*u.mm
    with pytest.raises(DomainError):
        check_length(3*u.s, 'L')
