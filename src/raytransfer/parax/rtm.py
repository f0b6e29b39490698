#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Ray transfer (ABCD) matrices of elements and systems

    The matrices act on the paraxial ray data (x, k), i.e. radial position
    and slope, and on the complex beam parameter q of a Gaussian beam.

    The matrices of the tangential and sagittal projections of tilted
    lenses and interfaces model the astigmatism introduced by off normal
    incidence, see Kogelnik and Li, Appl. Opt. 5, 1550 (1966) and
    Massey and Siegman, Appl. Opt. 26, 427 (1987).

.. codeauthor: Michael J. Hayford
"""
from functools import reduce
import operator

import attr
import numpy as np

from raytransfer.elem.elements import (Element, FreeSpace, Interface,
                                       ThinLens, ElementABCD,
                                       Tangential, Sagittal)
from raytransfer.util.numeric import is_dimensionless, one, zero, zero_inverse


@attr.s(frozen=True)
class RayTransferMatrix:
    """ A 2x2 ray transfer matrix [[A, B], [C, D]]

    Attributes:
        A: dimensionless
        B: length
        C: inverse length
        D: dimensionless
    """
    A = attr.ib()
    B = attr.ib()
    C = attr.ib()
    D = attr.ib()

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 1.0)

    def __matmul__(self, other):
        if not isinstance(other, RayTransferMatrix):
            return NotImplemented
        return RayTransferMatrix(self.A*other.A + self.B*other.C,
                                 self.A*other.B + self.B*other.D,
                                 self.C*other.A + self.D*other.C,
                                 self.C*other.B + self.D*other.D)

    def det(self):
        """ the determinant, AD - BC """
        return self.A*self.D - self.B*self.C

    def inverse(self):
        det = self.det()
        return RayTransferMatrix(self.D/det, -self.B/det,
                                 -self.C/det, self.A/det)

    def apply(self, x, k):
        """ returns the transformed ray data (x', k') """
        return self.A*x + self.B*k, self.C*x + self.D*k

    def apply_q(self, q):
        """ returns the transformed complex beam parameter """
        return (self.A*q + self.B)/(self.C*q + self.D)

    def with_length(self, length):
        """ returns the matrix with plain zero B and C entries replaced by
        zeros with the dimension of `length` and 1/`length`

        Elements without a length parameter, e.g. a plane
        :class:`~.Interface`, have plain zero entries that can't be
        combined with unit carrying ray data.
        """
        B, C = self.B, self.C
        if is_dimensionless(B) and B == 0:
            B = zero(length)
        if is_dimensionless(C) and C == 0:
            C = zero_inverse(length)
        return RayTransferMatrix(self.A, B, C, self.D)

    def to_array(self):
        """ returns the matrix as a 2x2 numpy array """
        return np.array([[self.A, self.B], [self.C, self.D]])

    def listobj_str(self):
        o_str = f"A={self.A}  B={self.B}\n"
        o_str += f"C={self.C}  D={self.D}\n"
        return o_str


def _lens_rtm(f):
    return RayTransferMatrix(one(f), zero(f), -1/f, one(f))


def _element_rtm(e: Element) -> RayTransferMatrix:
    match e:
        case FreeSpace(L=L):
            return RayTransferMatrix(one(L), L, zero_inverse(L), one(L))
        case Interface(eta=ratio, roc=R):
            return RayTransferMatrix(one(ratio), zero(R), (ratio - 1)/R,
                                     ratio)
        case ThinLens(f=f):
            return _lens_rtm(f)
        case ElementABCD(A=A, B=B, C=C, D=D):
            return RayTransferMatrix(A, B, C, D)
        case Tangential(element=ThinLens(f=f, aoi=aoi)):
            return _lens_rtm(f*np.cos(aoi))
        case Sagittal(element=ThinLens(f=f, aoi=aoi)):
            return _lens_rtm(f/np.cos(aoi))
        case Tangential(element=Interface(eta=ratio, aoi=aoi1, roc=R)):
            aoi2 = np.arcsin(ratio*np.sin(aoi1))
            cos1, cos2 = np.cos(aoi1), np.cos(aoi2)
            return RayTransferMatrix(cos2/cos1, zero(R),
                                     (cos2 - ratio*cos1)/(R*cos1*cos2),
                                     ratio*cos1/cos2)
        case Sagittal(element=Interface(eta=ratio, aoi=aoi1, roc=R)):
            aoi2 = np.arcsin(ratio*np.sin(aoi1))
            cos1, cos2 = np.cos(aoi1), np.cos(aoi2)
            return RayTransferMatrix(one(ratio), zero(R),
                                     (cos2 - ratio*cos1)/R,
                                     ratio)
        case Tangential(element=inner) | Sagittal(element=inner):
            # no plane dependence
            return _element_rtm(inner)
        case _:
            raise TypeError(f"{e!r} is not an optical element")


def rtm(elements) -> RayTransferMatrix:
    """ Returns the ray transfer matrix of an element or a system.

    The matrix of a system is the ordered product M1 @ M2 @ ... @ MN of the
    matrices of its elements; the empty system yields the identity.
    """
    if isinstance(elements, Element):
        return _element_rtm(elements)
    matrices = [_element_rtm(e) for e in elements]
    if len(matrices) == 0:
        return RayTransferMatrix.identity()
    return reduce(operator.matmul, matrices)


def eta(e: Element):
    """ Returns the ratio of refractive indices across an element.

    The beam's refractive index following the element is its index before
    the element divided by this ratio.
    """
    match e:
        case Interface(eta=ratio):
            return ratio
        case Tangential(element=inner) | Sagittal(element=inner):
            return eta(inner)
        case _:
            return 1.0


def effective_length(e: Element):
    """ Returns the propagation length of an element along the beam axis.

    Only free space moves the beam along its axis. The optical density of
    the medium is not taken into account.
    """
    match e:
        case FreeSpace(L=L):
            return L
        case Tangential(element=inner) | Sagittal(element=inner):
            return effective_length(inner)
        case _:
            return 0.0
