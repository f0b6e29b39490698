#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Propagation of beams through elements and systems

    The beam is always the second argument. Beams are never modified; each
    function returns new beam states.

.. codeauthor: Michael J. Hayford
"""
import bisect
import logging

import pandas as pd

from raytransfer.beam.geometric import GeometricBeam
from raytransfer.beam.gaussian import GaussianBeam, spotradius, wavefrontroc
from raytransfer.elem.elements import Element, FreeSpace
from raytransfer.exceptions import DomainError
from raytransfer.parax.rtm import RayTransferMatrix, rtm, eta, \
    effective_length
from raytransfer.typing import Beam, Length, Number, System

logger = logging.getLogger(__name__)


def transform_matrix(m: RayTransferMatrix, beam: Beam,
                     dz: Length = 0.0, eta: Number = 1.0) -> Beam:
    """ Propagate a beam through a ray transfer matrix.

    Args:
        m: the ray transfer matrix
        beam: a :class:`~.GeometricBeam` or :class:`~.GaussianBeam`
        dz: propagation distance along the beam axis
        eta: ratio of refractive indices, see :func:`~.rtm.eta`

    Returns:
        a new beam of the same type as `beam`
    """
    m = m.with_length(beam.x)
    x, k = m.apply(beam.x, beam.k)
    b = GeometricBeam(x=x, k=k, n=beam.n/eta, z=beam.z + dz)
    if isinstance(beam, GaussianBeam):
        return GaussianBeam(b, beam.wvl, m.apply_q(beam.q))
    return b


def transform(elements: Element | System, beam: Beam) -> Beam:
    """ Propagate a beam through an element or a system.

    The elements of a system are applied in order, each to the beam
    emerging from its predecessor.

    Args:
        elements: an element or a sequence of elements
        beam: a :class:`~.GeometricBeam` or :class:`~.GaussianBeam`

    Returns:
        the beam following the last element
    """
    if isinstance(elements, Element):
        return transform_matrix(rtm(elements), beam,
                                dz=effective_length(elements),
                                eta=eta(elements))
    for e in elements:
        beam = transform(e, beam)
    return beam


def beamtrace(elements: Element | System, beam0: Beam) -> list[Beam]:
    """ Propagate a beam through a system, keeping every state.

    Returns:
        a list of N+1 beams for a system of N elements: the unpropagated
        beam, followed by the beams emerging from each successive element
    """
    if isinstance(elements, Element):
        elements = [elements]
    beams = [beam0]
    for e in elements:
        beams.append(transform(e, beams[-1]))
    logger.debug("beamtrace: %d elements, z from %s to %s",
                 len(beams) - 1, beams[0].z, beams[-1].z)
    return beams


def spotradiusfunc(elements: System, beam: GaussianBeam, outside=None):
    """ Returns a function of the axial position giving the spot radius.

    The beam is traced through the system once. The returned function
    continues the last beam state located at or before the requested
    position with free space propagation to that position.

    Args:
        elements: the optical system
        beam: the :class:`~.GaussianBeam` entering the system
        outside: value returned for positions not covered by the system.
                 If None, a :class:`~.DomainError` is raised instead.
    """
    if not isinstance(beam, GaussianBeam):
        raise TypeError("spotradiusfunc requires a GaussianBeam")
    beams = beamtrace(elements, beam)
    zs = [b.z for b in beams]

    def spot_radius(z):
        if z < zs[0] or z > zs[-1]:
            if outside is None:
                raise DomainError("system does not cover the requested "
                                  f"beam position {z}")
            return outside
        # the locations are sorted since free space lengths are positive
        i = bisect.bisect_right(zs, z) - 1
        return spotradius(transform(FreeSpace(z - zs[i]), beams[i]))

    return spot_radius


def trace_df(beams):
    """ return a |DataFrame| containing the beam states of a trace """
    columns = ['z', 'n', 'x', 'k']
    data = [[b.z, b.n, b.x, b.k] for b in beams]
    if all(isinstance(b, GaussianBeam) for b in beams):
        columns += ['q', 'w', 'roc']
        for row, b in zip(data, beams):
            row += [b.q, spotradius(b), wavefrontroc(b)]
    df = pd.DataFrame(data, columns=columns)
    df.index.names = ['state']
    return df
