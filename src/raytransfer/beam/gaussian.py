#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Gaussian (TEM00) beam state and derived beam properties

    A :class:`GaussianBeam` combines a :class:`~.GeometricBeam`, i.e. the
    beam axis, with the vacuum wavelength and the complex beam parameter

        q = (z - z0) + i*zR

    where z0 is the location of the waist and zR = pi*n*w0**2/wvl is the
    Rayleigh range.

    The functions :func:`rayleighrange` and :func:`waistdistance` accept
    either a beam or a bare complex beam parameter. :func:`beamparameter`
    returns the parameter of a beam or the self consistent parameter of a
    round trip through an optical cavity, see :func:`cavity_mode`.

.. codeauthor: Michael J. Hayford
"""
import logging
import math

import attr

from raytransfer.beam.geometric import GeometricBeam
from raytransfer.exceptions import DomainError
from raytransfer.parax.rtm import RayTransferMatrix, rtm
from raytransfer.util.numeric import (check_dimensionless,
                                      check_same_dimension, promote,
                                      to_complex, zero)

logger = logging.getLogger(__name__)


@attr.s(frozen=True)
class GaussianBeam:
    """ A Gaussian beam.

    Use :meth:`from_waist`, :meth:`from_beamparameter` or
    :meth:`from_cavity` to create a beam.

    Attributes:
        b: the :class:`~.GeometricBeam` of the beam axis
        wvl: vacuum wavelength
        q: complex beam parameter
    """
    b = attr.ib(validator=attr.validators.instance_of(GeometricBeam))
    wvl = attr.ib()
    q = attr.ib()

    @q.validator
    def _check_q(self, attribute, value):
        check_same_dimension(value, self.wvl, 'q')

    @classmethod
    def from_waist(cls, wvl, w0, z0=None, n=1.0):
        """ create a beam at z = 0 from its waist

        Args:
            wvl: vacuum wavelength
            w0: waist radius
            z0: location of the waist along the beam axis, defaults to 0
            n: refractive index

        Raises:
            DomainError: if `n` isn't dimensionless or `w0` and `z0` aren't
                         lengths like `wvl`
        """
        check_dimensionless(n, 'n')
        check_same_dimension(w0, wvl, 'w0')
        wvl, w0 = promote(wvl, w0)
        if z0 is None:
            z0 = zero(wvl)
        else:
            check_same_dimension(z0, wvl, 'z0')
            z0, = promote(z0)
        n, = promote(n)

        z = zero(wvl)
        zR = math.pi*n*w0**2/wvl
        return cls(GeometricBeam(x=zero(wvl), k=zero(n), n=n, z=z),
                   wvl, (z - z0) + 1j*zR)

    @classmethod
    def from_beamparameter(cls, wvl, q, n=1.0, z=None):
        """ create a beam from a known complex beam parameter `q`

        Args:
            wvl: vacuum wavelength
            q: complex beam parameter
            n: refractive index
            z: location along the beam axis, defaults to 0
        """
        check_dimensionless(n, 'n')
        check_same_dimension(q, wvl, 'q')
        z = zero(wvl) if z is None else z
        return cls(GeometricBeam(x=zero(wvl), k=zero(n), n=n, z=z),
                   wvl, to_complex(q))

    @classmethod
    def from_cavity(cls, system, wvl, n=1.0):
        """ create the fundamental mode of an optical cavity

        Args:
            system: the elements of one round trip through the cavity
            wvl: vacuum wavelength
            n: refractive index
        """
        return cls.from_beamparameter(wvl, beamparameter(system), n=n)

    @property
    def z(self):
        return self.b.z

    @property
    def n(self):
        return self.b.n

    @property
    def x(self):
        return self.b.x

    @property
    def k(self):
        return self.b.k

    def listobj_str(self):
        o_str = f"z={self.z}   n={self.n}   wvl={self.wvl}\n"
        o_str += f"q={self.q}\n"
        o_str += f"spot radius={spotradius(self)}\n"
        o_str += f"waist radius={waistradius(self)}   "
        o_str += f"waist location={waistlocation(self)}\n"
        return o_str


def cavity_mode(m: RayTransferMatrix):
    """ Returns the self consistent beam parameter of a round trip matrix

    The beam parameter q is a fixed point of the round trip,

        q = (A*q + B)/(C*q + D)  <=>  C*q**2 + (D - A)*q - B = 0

    Of the two roots, the one with a positive imaginary part is returned.

    Raises:
        DomainError: if the cavity doesn't support a stable mode
    """
    if m.C == 0:
        raise DomainError("cavity without focusing power has no stable mode")
    disc = (m.D - m.A)**2 + 4*m.B*m.C
    if disc >= 0:
        raise DomainError("cavity is not stable, "
                          f"(A + D)/2 = {(m.A + m.D)/2}")
    re_q = (m.A - m.D)/(2*m.C)
    im_q = (-disc)**0.5/(2*abs(m.C))
    logger.debug("cavity mode roots: %s +/- %si", re_q, im_q)
    return re_q + 1j*im_q


def _q(beam_or_q):
    if isinstance(beam_or_q, GaussianBeam):
        return beam_or_q.q
    return beam_or_q


def beamparameter(obj):
    """ Returns the complex beam parameter.

    Args:
        obj: a :class:`GaussianBeam`, or the system or round trip matrix of
             an optical cavity
    """
    if isinstance(obj, GaussianBeam):
        return obj.q
    if not isinstance(obj, RayTransferMatrix):
        obj = rtm(obj)
    return cavity_mode(obj)


def spotradius(beam: GaussianBeam):
    """ Returns the 1/e**2 intensity radius of a beam at its location. """
    return (-beam.wvl/(math.pi*beam.n*(1/beam.q).imag))**0.5


def wavefrontroc(beam: GaussianBeam):
    """ Returns the radius of curvature of the wavefront.

    The radius is infinite at the waist.
    """
    inv_roc = (1/beam.q).real
    if inv_roc == 0:
        # infinite, with the dimension of q
        return math.inf*abs(beam.q)
    return 1/inv_roc


def rayleighrange(beam_or_q):
    """ Returns the Rayleigh range of a beam or beam parameter. """
    return _q(beam_or_q).imag


def waistdistance(beam_or_q):
    """ Returns the distance from the current location to the waist. """
    return -_q(beam_or_q).real


def waistlocation(beam: GaussianBeam):
    """ Returns the location of the waist along the beam axis. """
    return beam.z - beam.q.real


def waistradius(beam: GaussianBeam):
    """ Returns the radius of the beam waist. """
    return (beam.wvl*beam.q.imag/(math.pi*beam.n))**0.5


def divergence(beam: GaussianBeam):
    """ Returns the far field half angle divergence, w0/zR. """
    return waistradius(beam)/rayleighrange(beam)


def beamparameterproduct(beam: GaussianBeam):
    """ Returns the beam parameter product normalized to that of an ideal
    Gaussian beam, pi*n*w0*divergence/wvl.

    The result is 1 for an ideal beam and is invariant under lossless
    propagation.
    """
    return math.pi*beam.n*waistradius(beam)*divergence(beam)/beam.wvl
