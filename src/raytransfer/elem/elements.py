#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Optical elements for ray transfer matrix modeling

    An optical system is an ordered sequence (list or tuple) of elements,
    given in the direction of propagation. The element types are:

        - :class:`FreeSpace`: propagation over a distance
        - :class:`Interface`: refraction at a (curved) boundary between two
          media
        - :class:`ThinLens`: a thin lens; :func:`mirror` models a curved
          mirror as an equivalent thin lens
        - :class:`ElementABCD`: an element given by its matrix entries
        - :class:`Tangential` and :class:`Sagittal`: the projection of an
          element onto the tangential or sagittal plane, created with
          :func:`tangential` and :func:`sagittal`

    Elements are immutable. Lengths and dimensionless numbers may be plain
    floats or unit carrying quantities, see :mod:`~.numeric`.

.. codeauthor: Michael J. Hayford
"""
import math

import attr

from raytransfer.util.numeric import (check_angle, check_dimensionless,
                                      check_length, isapprox)


def _dimensionless(instance, attribute, value):
    check_dimensionless(value, attribute.name)


def _length(instance, attribute, value):
    check_length(value, attribute.name)


def _angle(instance, attribute, value):
    check_angle(value, attribute.name)


@attr.s(frozen=True)
class FreeSpace:
    """ Propagation over the distance `L`.

    The optical density of the space is assumed to be unity.
    """
    L = attr.ib(validator=_length)


@attr.s(frozen=True)
class Interface:
    """ An optical interface between two media.

    Attributes:
        eta: ratio n_next/n_prev of the refractive indices following and
             preceding the interface
        aoi: angle of incidence
        roc: radius of curvature, positive when the beam hits the concave
             side

    The default arguments describe an interface without any effect on a
    beam.
    """
    eta = attr.ib(default=1.0, validator=_dimensionless)
    aoi = attr.ib(default=0.0, validator=_angle)
    roc = attr.ib(default=math.inf, validator=_length)

    @classmethod
    def from_indices(cls, n1=1.0, n2=1.0, aoi=0.0, roc=math.inf):
        """ create an Interface from the preceding and following indices """
        check_dimensionless(n1, 'n1')
        check_dimensionless(n2, 'n2')
        return cls(eta=n2/n1, aoi=aoi, roc=roc)


@attr.s(frozen=True)
class ThinLens:
    """ A thin lens with focal length `f` and angle of incidence `aoi`. """
    f = attr.ib(validator=_length)
    aoi = attr.ib(default=0.0, validator=_angle)


@attr.s(frozen=True)
class ElementABCD:
    """ An element given by the entries of its ray transfer matrix.

    `A` and `D` are dimensionless, `B` is a length and `C` an inverse
    length. The element occupies no space and leaves the refractive index
    unchanged.
    """
    A = attr.ib(validator=_dimensionless)
    B = attr.ib(validator=_length)
    C = attr.ib()
    D = attr.ib(validator=_dimensionless)

    @C.validator
    def _check_BC(self, attribute, value):
        check_dimensionless(self.B*value, 'B*C')


def mirror(roc=math.inf, f=None, aoi=0.0) -> ThinLens:
    """ A mirror, modeled as the equivalent :class:`ThinLens`.

    Args:
        roc: radius of curvature
        f: focal length, defaults to roc/2
        aoi: angle of incidence

    Raises:
        ValueError: if roc and f aren't compatible, i.e. roc != 2*f
    """
    if f is None:
        f = 0.5*roc
    if not isapprox(roc, 2*f):
        raise ValueError("roc and f are incompatible")
    return ThinLens(f=f, aoi=aoi)


@attr.s(frozen=True)
class Tangential:
    """ Pseudo-element selecting the tangential (aka parallel) plane
    behavior of `element` """
    element = attr.ib()


@attr.s(frozen=True)
class Sagittal:
    """ Pseudo-element selecting the sagittal plane behavior of `element` """
    element = attr.ib()


Element = FreeSpace | Interface | ThinLens | ElementABCD | Tangential | Sagittal


def _project(elements, plane, other_plane):
    if isinstance(elements, (list, tuple)):
        return type(elements)(_project(e, plane, other_plane)
                              for e in elements)
    if isinstance(elements, (FreeSpace, plane)):
        # free space is isotropic
        return elements
    if isinstance(elements, other_plane):
        raise ValueError(f"{elements!r} is already projected onto the "
                         f"{other_plane.__name__.lower()} plane")
    if not isinstance(elements, Element):
        raise TypeError(f"{elements!r} is not an optical element")
    return plane(elements)


def tangential(elements):
    """ project an element, or each element of a system, onto the
    tangential plane """
    return _project(elements, Tangential, Sagittal)


def sagittal(elements):
    """ project an element, or each element of a system, onto the
    sagittal plane """
    return _project(elements, Sagittal, Tangential)
