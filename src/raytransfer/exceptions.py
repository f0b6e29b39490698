#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 Michael J. Hayford
""" Exception classes for raytransfer

.. codeauthor: Michael J. Hayford
"""


class RayTransferError(Exception):
    """ Base class for errors raised by raytransfer """


class DomainError(RayTransferError, ValueError):
    """ Exception raised when an argument lies outside the valid domain

    Raised for dimensionally inconsistent constructor arguments, for spot
    radius queries outside of the traced span of a system and for optical
    cavities that do not support a stable mode.
    """
