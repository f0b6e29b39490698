#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" script file providing an environment for using raytransfer

    Intended for interactive use, e.g. ``from raytransfer.environment
    import *`` in a notebook.

.. codeauthor: Michael J. Hayford
"""

# initialization
import math
import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt
import pandas as pd

# raytransfer
import raytransfer
from raytransfer import listobj
from raytransfer.exceptions import RayTransferError, DomainError

# elements and systems
from raytransfer.elem.elements import (FreeSpace, Interface, ThinLens,
                                       ElementABCD, Tangential, Sagittal,
                                       mirror, tangential, sagittal)
from raytransfer.elem.discretize import discretize

# ray transfer matrices
from raytransfer.parax.rtm import (RayTransferMatrix, rtm, eta,
                                   effective_length)
from raytransfer.parax.comparisons import isapprox

# beams
from raytransfer.beam.geometric import (GeometricBeam, location, ior,
                                        radialpos, slope)
from raytransfer.beam.gaussian import (GaussianBeam, cavity_mode,
                                       beamparameter, spotradius,
                                       wavefrontroc, rayleighrange,
                                       waistdistance, waistlocation,
                                       waistradius, divergence,
                                       beamparameterproduct)

# propagation
from raytransfer.raytr.propagate import (transform, transform_matrix,
                                         beamtrace, spotradiusfunc,
                                         trace_df)

# plotting
from raytransfer.mpl.beamfigure import BeamProfileFigure
