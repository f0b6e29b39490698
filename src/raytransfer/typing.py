#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for raytransfer

.. codeauthor: Michael J. Hayford
"""
from collections.abc import Sequence
from typing import Any

from raytransfer.beam.gaussian import GaussianBeam
from raytransfer.beam.geometric import GeometricBeam
from raytransfer.elem.elements import Element

# plain numbers or unit carrying quantities, see raytransfer.util.numeric
Length = Any
Number = Any

System = Sequence[Element]
Beam = GeometricBeam | GaussianBeam
