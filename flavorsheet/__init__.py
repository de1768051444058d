"""
FlavorSheet
===========

Extracts creature flavor text from game database scripts into
translator-friendly spreadsheets.
"""

from .version import VERSION

__version__ = VERSION
