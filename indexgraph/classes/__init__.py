"""
Value classes shared by the graph store and its edge variants.
"""

from .handle import Handle
from .connection import Connection

__all__ = [
    'Handle',
    'Connection',
]
