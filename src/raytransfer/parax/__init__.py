""" Package for ray transfer matrices

    The :mod:`~.parax` subpackage provides the paraxial (ABCD) matrix
    calculations:

        - Ray transfer matrices of elements and systems, :mod:`~.rtm`
        - Approximate comparison of elements and systems,
          :mod:`~.comparisons`
"""
