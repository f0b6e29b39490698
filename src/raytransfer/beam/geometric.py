#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Geometric (paraxial ray) beam state

.. codeauthor: Michael J. Hayford
"""
import attr

from raytransfer.util.numeric import (check_dimensionless,
                                      check_same_dimension, zero)


def _dimensionless(instance, attribute, value):
    check_dimensionless(value, attribute.name)


@attr.s(frozen=True)
class GeometricBeam:
    """ A paraxial ray.

    Attributes:
        x: radial position (length)
        k: slope, i.e. the (small) angle or its sine or tangent
        n: refractive index (aka optical density)
        z: location along the beam axis, defaults to zero
    """
    x = attr.ib(default=0.0)
    k = attr.ib(default=0.0, validator=_dimensionless)
    n = attr.ib(default=1.0, validator=_dimensionless)
    z = attr.ib()

    @z.default
    def _z_default(self):
        return zero(self.x)

    @z.validator
    def _check_z(self, attribute, value):
        check_same_dimension(value, self.x, 'z')


def location(beam):
    """ Returns the location of a beam, measured along the beam axis. """
    return beam.z


def ior(beam):
    """ Returns the index of refraction at the beam's location. """
    return beam.n


def radialpos(beam):
    """ Returns the radial position of the beam. """
    return beam.x


def slope(beam):
    """ Returns the slope of the beam. """
    return beam.k
