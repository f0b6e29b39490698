""" Package for beam propagation

    The :mod:`~.raytr` subpackage propagates geometric and Gaussian beams
    through optical systems, :mod:`~.propagate`. This includes tracing a
    beam element by element and the spot radius as a function of the
    position along the beam axis.
"""
