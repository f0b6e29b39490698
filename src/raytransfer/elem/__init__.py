""" Package providing the optical element model

    The :mod:`~.elem` subpackage provides the building blocks of optical
    systems:

        - Element types and plane projections, :mod:`~.elements`
        - Splitting of space occupying elements, :mod:`~.discretize`

    An optical system is a list or tuple of elements in the order of
    propagation.
"""
