#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for systems and beams using astropy units

.. codeauthor: Michael J. Hayford
"""

import pytest
import astropy.units as u

from raytransfer.elem.elements import (FreeSpace, Interface, ThinLens, mirror,
                                       tangential, sagittal)
from raytransfer.parax.rtm import rtm
from raytransfer.parax.comparisons import isapprox
from raytransfer.beam.geometric import GeometricBeam
from raytransfer.beam.gaussian import (GaussianBeam, beamparameter,
                                       rayleighrange, spotradius,
                                       waistdistance)
from raytransfer.raytr.propagate import transform, beamtrace, spotradiusfunc
from raytransfer.util.numeric import is_dimensionless


def is_unitful_rtm(m):
    """ check the dimensions of all matrix entries """
    return (is_dimensionless(m.A) and is_dimensionless(m.D) and
            m.B.unit.is_equivalent(u.m) and
            m.C.unit.is_equivalent(u.m**-1))


# general test setup, unitful
fu = 100*u.mm
Lu = 1000*u.mm
w0u = 1*u.mm
wvlu = 1000*u.nm
expander_2x_u = [ThinLens(f=fu), FreeSpace(3*fu), ThinLens(f=2*fu)]
system_u = [*expander_2x_u, FreeSpace(Lu), *reversed(expander_2x_u)]
beam_u = GaussianBeam.from_waist(wvl=wvlu, w0=w0u)


def test_ray_transfer_matrices():
    assert is_unitful_rtm(rtm(ThinLens(f=100*u.mm)))
    assert is_unitful_rtm(rtm(FreeSpace(500*u.mm)))
    assert is_unitful_rtm(rtm(ThinLens(f=100*u.mm)) @
                          rtm(FreeSpace(500*u.mm)))
    assert is_unitful_rtm(rtm([ThinLens(f=100*u.mm),
                               FreeSpace(500*u.mm)]))
    assert float(rtm(system_u).det()) == pytest.approx(1.0)


def test_transform():
    assert beam_u.z.unit.is_equivalent(u.m)
    assert isinstance(transform(ThinLens(f=100*u.mm), beam_u), GaussianBeam)
    assert isinstance(transform(FreeSpace(500*u.mm), beam_u), GaussianBeam)
    b = transform(system_u, beam_u)
    assert isinstance(b, GaussianBeam)
    assert b.z.to_value(u.mm) == pytest.approx(1600)


def test_general():
    assert rtm(sagittal(system_u)) == rtm(tangential(system_u))
    assert is_unitful_rtm(rtm(sagittal(system_u)))
    assert is_unitful_rtm(rtm(tangential(system_u)))
    assert len(beamtrace(system_u, beam_u)) == len(system_u) + 1
    w = spotradiusfunc(expander_2x_u, beam_u)(3*fu)
    assert w.to_value(u.mm) == pytest.approx(2*w0u.to_value(u.mm), rel=0.01)


def test_comparisons():
    assert isapprox(FreeSpace(Lu), [FreeSpace(1.0*Lu)])
    assert isapprox(FreeSpace(Lu), FreeSpace(1*u.m))
    assert not isapprox(FreeSpace(Lu), FreeSpace(1.1*Lu))
    assert isapprox(system_u, FreeSpace(-0.5*fu))


def test_cavity():
    cavity = [mirror(roc=400*u.cm), FreeSpace(50*u.cm),
              mirror(roc=300*u.cm), FreeSpace(50*u.cm)]
    q = beamparameter(cavity)
    assert rayleighrange(q).to_value(u.cm) == pytest.approx(88.88, abs=0.005)
    assert waistdistance(q).to_value(u.cm) == pytest.approx(20.83,
                                                            abs=0.005)


def test_plane_interfaces():
    gob_u = GeometricBeam(x=1*u.mm, k=0.01)
    ifc = Interface(eta=1.5)
    for e in (Interface(), ifc, tangential(Interface(eta=1.5, aoi=0.1)),
              sagittal(Interface(eta=1.5, aoi=0.1))):
        b = transform(e, beam_u)
        assert b.q.unit.is_equivalent(u.m)
        # only tilted tangential interfaces rescale the beam
        assert spotradius(b).to_value(u.mm) == pytest.approx(1.0, rel=0.01)
        g = transform(e, gob_u)
        assert g.x.to_value(u.mm) == pytest.approx(1.0, rel=0.01)
        assert is_dimensionless(g.k)

    assert float(transform(Interface(), gob_u).k) == pytest.approx(0.01)
    g = transform([FreeSpace(10*u.mm), ifc], gob_u)
    assert g.x.to_value(u.mm) == pytest.approx(1.1)
    assert float(g.k) == pytest.approx(1.5*0.01)
    assert g.z.to_value(u.mm) == pytest.approx(10)

    trace = beamtrace([FreeSpace(10*u.mm), ifc, FreeSpace(10*u.mm)], beam_u)
    assert trace[-1].n == pytest.approx(1/1.5)
    assert trace[-1].z.to_value(u.mm) == pytest.approx(20)


def test_matrix_with_length():
    m = rtm(Interface(eta=1.5)).with_length(1*u.mm)
    assert is_unitful_rtm(m)
    assert m.D == 1.5
    # entries with a dimension are kept
    m = rtm(FreeSpace(500*u.mm))
    assert m.with_length(1*u.m) == m
