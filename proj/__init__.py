"""
proj - register, list and jump between project directories.
"""

__version__ = "0.1.0"
