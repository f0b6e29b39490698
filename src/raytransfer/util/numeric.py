#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" arithmetic support for plain and unit carrying quantities

    The physics formulas of raytransfer are written against a small set of
    capabilities that plain floats, numpy scalars and unit carrying
    quantities (e.g. :class:`astropy.units.Quantity`) have in common:

        - addition and subtraction of quantities of the same dimension
        - multiplication and division, combining the dimensions
        - conversion to float, which unit libraries refuse for quantities
          that are not dimensionless
        - numpy ufunc support, e.g. :func:`numpy.sin` and
          :func:`numpy.zeros_like`

    Dimensional consistency is checked with :func:`is_dimensionless` and
    :func:`same_dimension`, never by looking at numeric values.

.. codeauthor: Michael J. Hayford
"""
import math

import numpy as np

from raytransfer.exceptions import DomainError

DEFAULT_RTOL = math.sqrt(np.finfo(float).eps)


def is_dimensionless(x) -> bool:
    """ returns True if `x` is a dimensionless number

    Complex values are judged by their real part.
    """
    try:
        float(x.real)
    except (AttributeError, TypeError, ValueError):
        return False
    return True


def same_dimension(a, b) -> bool:
    """ returns True if `a` and `b` share the same physical dimension

    A dimensionless zero is compatible with any dimension.
    """
    for v in (a, b):
        if is_dimensionless(v) and v == 0:
            return True
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = np.true_divide(a, b)
    return is_dimensionless(ratio)


def check_dimensionless(x, name: str):
    """ raise a DomainError if `x` isn't dimensionless, else return `x` """
    if not is_dimensionless(x):
        raise DomainError(f"{name} must be dimensionless, got {x!r}")
    return x


def check_same_dimension(a, b, name: str):
    """ raise a DomainError if `a` and `b` have different dimensions """
    if not same_dimension(a, b):
        raise DomainError(f"{name}: {a!r} and {b!r} have incompatible "
                          "dimensions")
    return a


def is_length(x) -> bool:
    """ returns True if `x` can be used as a length

    Plain numbers are lengths in the unit system of the caller. Unit
    carrying quantities that report their physical type, like
    :class:`astropy.units.Quantity`, must report a length.
    """
    if is_dimensionless(x):
        return True
    physical_type = getattr(getattr(x, 'unit', None), 'physical_type', None)
    return physical_type is None or physical_type == 'length'


def check_length(x, name: str):
    """ raise a DomainError if `x` isn't a length, else return `x` """
    if not is_length(x):
        raise DomainError(f"{name} must be a length, got {x!r}")
    return x


def check_angle(x, name: str):
    """ raise a DomainError if `x` can't be used as an angle

    Plain numbers are taken to be radians; unit carrying angles are
    accepted as long as trigonometric functions can be applied to them.
    """
    try:
        s = np.sin(x)
    except (TypeError, ValueError) as err:
        raise DomainError(f"{name} must be an angle, got {x!r}") from err
    if not is_dimensionless(s):
        raise DomainError(f"{name} must be an angle, got {x!r}")
    return x


def zero(x):
    """ returns zero with the dimension of `x`, also for infinite `x` """
    return np.zeros_like(x)[()]


def zero_inverse(x):
    """ returns zero with the dimension of 1/`x` """
    with np.errstate(divide='ignore'):
        return zero(np.reciprocal(x*1.0))


def one(x):
    """ returns the (dimensionless) multiplicative identity for `x` """
    return x**0


def promote(*xs):
    """ returns floating point versions of the inputs """
    return tuple(x*1.0 for x in xs)


def to_complex(x):
    """ returns a complex valued version of `x` with the same dimension """
    return x*(1 + 0j)


def isapprox(a, b, rtol: float = DEFAULT_RTOL, atol=None) -> bool:
    """ returns True if `a` and `b` agree within the given tolerance

    The test is ``|a - b| <= atol + rtol*max(|a|, |b|)``. Quantities of
    different dimensions are never approximately equal. Equal infinities
    compare as equal.

    Args:
        a: number or quantity
        b: number or quantity
        rtol: relative tolerance
        atol: absolute tolerance with the dimension of `a`, or None
    """
    if not same_dimension(a, b):
        return False
    if a == b:
        return True
    if not (np.isfinite(a) and np.isfinite(b)):
        return False
    tol = rtol*max(abs(a), abs(b))
    if atol is not None:
        tol = tol + atol
    return bool(abs(a - b) <= tol)
