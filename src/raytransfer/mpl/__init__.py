""" package implementing raytransfer graphics using matplotlib

    The :mod:`~.mpl` subpackage draws beams using the matplotlib plotting
    package:

        - spot radius of a Gaussian beam along a system, :mod:`~.beamfigure`
"""
