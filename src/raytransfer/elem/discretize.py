#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Split the space occupying elements of a system

.. codeauthor: Michael J. Hayford
"""
import numbers

from raytransfer.elem.elements import FreeSpace, Tangential, Sagittal


def discretize(elements, N: int) -> list:
    """ Discretize an element or a system into a list of elements.

    Each element that occupies space is split into `N` appropriately
    shortened copies of itself; all other elements are passed through
    unchanged. The order of the elements is preserved, and the composed
    ray transfer matrix of the result equals that of the input.

    Args:
        elements: an element or a sequence of elements
        N: number of pieces per space occupying element, N >= 1

    Returns:
        list of elements

    Raises:
        ValueError: if N isn't a positive integer
    """
    if not isinstance(N, numbers.Integral) or N < 1:
        raise ValueError(f"N must be a positive integer, got {N!r}")

    if isinstance(elements, (list, tuple)):
        return [piece for e in elements for piece in discretize(e, N)]

    match elements:
        case FreeSpace(L=L):
            return [FreeSpace(L/N)]*N
        case Tangential(element=FreeSpace() as e):
            return [Tangential(piece) for piece in discretize(e, N)]
        case Sagittal(element=FreeSpace() as e):
            return [Sagittal(piece) for piece in discretize(e, N)]
        case _:
            return [elements]
