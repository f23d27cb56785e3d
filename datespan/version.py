"""
Module containing datespan version.

`setup.py` loads this module to obtain the version, so it must not
import anything from the `datespan` package.
"""


__version__ = '0.1.0'
