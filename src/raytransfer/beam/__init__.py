""" Package for beam states

    The :mod:`~.beam` subpackage provides the two beam representations and
    their derived quantities:

        - paraxial rays and the accessors common to all beams,
          :mod:`~.geometric`
        - Gaussian beams, their derived properties and the fundamental
          mode of optical cavities, :mod:`~.gaussian`
"""
