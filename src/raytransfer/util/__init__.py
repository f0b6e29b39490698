""" Package for numeric support functions

    The :mod:`~.util` subpackage provides the arithmetic used by the
    physics formulas:

        - the numeric capability contract for plain and unit carrying
          quantities, :mod:`~.numeric`
"""
