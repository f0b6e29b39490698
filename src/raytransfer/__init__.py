# -*- coding: utf-8 -*-
""" The **raytransfer** package for propagating rays and Gaussian beams
    through optical systems using ray transfer (ABCD) matrices

    An optical system is an ordered sequence of elements. It is supported
    by the following subpackages:

        - :mod:`~.elem`: optical elements and their tangential and sagittal
          projections, discretization of systems
        - :mod:`~.parax`: ray transfer matrices of elements and systems,
          approximate comparisons
        - :mod:`~.beam`: geometric and Gaussian beam states, derived beam
          properties and cavity modes
        - :mod:`~.raytr`: propagation of beams through elements and systems

    The :mod:`~.mpl` subpackage plots beam profiles using the
    :doc:`matplotlib <matplotlib:index>` package.

    The :mod:`~.util` subpackage provides the arithmetic support that
    lets plain numbers and unit carrying quantities (e.g.
    :mod:`astropy.units`) be used interchangeably.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object, e.g.
    :meth:`.GaussianBeam.listobj_str`. Objects without it are printed
    using their repr().
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
