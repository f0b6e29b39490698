#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" mpl figure of a Gaussian beam's spot radius along an optical system

.. codeauthor: Michael J. Hayford
"""
import math

import numpy as np
from matplotlib.figure import Figure

from raytransfer.beam.gaussian import spotradius
from raytransfer.elem.discretize import discretize
from raytransfer.elem.elements import FreeSpace
from raytransfer.raytr.propagate import beamtrace, spotradiusfunc


class BeamProfileFigure(Figure):
    """ Plot of the spot radius of a Gaussian beam vs. axial position

    The beam envelope is drawn as +/- the spot radius. The locations of
    all elements that don't occupy space are marked with vertical lines.

    Args:
        system: the optical system
        beam: the :class:`~.GaussianBeam` entering the system
        zlim: (zmin, zmax) axial window; defaults to the span of the system
        num_points: number of samples per free space element, or in the
                    axial window if `zlim` is given
    """

    def __init__(self, system, beam, zlim=None, num_points=100, **kwargs):
        self.system = system
        self.beam = beam
        self.zlim = zlim
        self.num_points = num_points

        super().__init__(**kwargs)

        self.update_data()

    def refresh(self, **kwargs):
        self.update_data(**kwargs)
        self.plot()
        return self

    def update_data(self, **kwargs):
        if self.zlim is None:
            beams = beamtrace(discretize(self.system, self.num_points),
                              self.beam)
            self.z_data = np.array([b.z for b in beams])
            self.w_data = np.array([spotradius(b) for b in beams])
        else:
            srf = spotradiusfunc(self.system, self.beam, outside=math.nan)
            self.z_data = np.linspace(*self.zlim, self.num_points)
            self.w_data = np.array([srf(z) for z in self.z_data])

        trace = beamtrace(self.system, self.beam)
        self.elem_z = [b.z for e, b in zip(self.system, trace[1:])
                       if not isinstance(e, FreeSpace)]
        return self

    def plot(self):
        self.clf()
        self.ax = self.add_subplot(1, 1, 1)

        self.ax.set_title("Beam Profile", pad=10.0, fontsize=18)

        self.ax.fill_between(self.z_data, -self.w_data, self.w_data,
                             alpha=0.3, color='crimson', lw=0)
        self.ax.plot(self.z_data, self.w_data, c='crimson')
        self.ax.plot(self.z_data, -self.w_data, c='crimson')
        for z in self.elem_z:
            self.ax.axvline(z, ls='--', c='tab:blue')
        if self.zlim is not None:
            self.ax.set_xlim(*self.zlim)

        self.ax.set_xlabel('z')
        self.ax.set_ylabel('spot radius')
        return self
