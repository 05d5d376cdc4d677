# aerolab/debug.py

"""
Debug output toggle shared by the engine, simulator and preset loader.
"""

from . import constants


def dprint(*args, **kwargs):
    """Debug print that can be globally toggled."""
    if constants.DEBUG_LOG:
        print(*args, **kwargs)
