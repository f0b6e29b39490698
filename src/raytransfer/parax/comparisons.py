#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" approximate comparison of elements and systems

    Two elements or systems are approximately equal when their ray transfer
    matrices are, using the Frobenius norm of the matrix difference.

.. codeauthor: Michael J. Hayford
"""
import numpy as np

from raytransfer.parax.rtm import RayTransferMatrix, rtm
from raytransfer.util.numeric import DEFAULT_RTOL, is_dimensionless


def _as_rtm(obj) -> RayTransferMatrix:
    if isinstance(obj, RayTransferMatrix):
        return obj
    return rtm(obj)


def _length_scale(ma, mb):
    """ a length that makes the B and C entries of both matrices
    dimensionless """
    if is_dimensionless(ma.B) and is_dimensionless(mb.B):
        return 1.0
    b = max(abs(ma.B), abs(mb.B))
    c = max(abs(ma.C), abs(mb.C))
    if b != 0:
        return b
    elif c != 0:
        return 1/c
    return None


def _normalized(m, length_scale):
    if length_scale is None:
        return np.array([float(m.A), 0., 0., float(m.D)])
    return np.array([float(m.A), float(m.B/length_scale),
                     float(m.C*length_scale), float(m.D)])


def isapprox(a, b, rtol: float = DEFAULT_RTOL, atol: float = 0.0,
             length_scale=None) -> bool:
    """ test approximate equality of two elements, systems or matrices

    The test is ``norm(Ma - Mb) <= atol + rtol*max(norm(Ma), norm(Mb))``.

    For plain numbers the matrix entries are compared as they are. For
    unit carrying matrices, B is divided and C multiplied by
    `length_scale`, which defaults to a length derived from the B and C
    entries of both matrices.

    Args:
        a: element, sequence of elements or :class:`~.RayTransferMatrix`
        b: element, sequence of elements or :class:`~.RayTransferMatrix`
        rtol: relative tolerance
        atol: absolute tolerance
        length_scale: length used to make B and C dimensionless
    """
    ma = _as_rtm(a)
    mb = _as_rtm(b)
    if length_scale is None:
        length_scale = _length_scale(ma, mb)
    va = _normalized(ma, length_scale)
    vb = _normalized(mb, length_scale)
    diff = np.linalg.norm(va - vb)
    return bool(diff <= atol + rtol*max(np.linalg.norm(va),
                                        np.linalg.norm(vb)))
