"""
Version of pgfleet.
"""

__version__ = '1.0'
