"""
Weighted edge payload.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .handle import Handle

W = TypeVar("W")


@dataclass(frozen=True)
class Connection(Generic[W]):
    """
    Outgoing edge of a weighted graph.

    The weight cannot be changed once the connection is stored; remove the
    edge and add it again instead.

    Attributes:
        to: Target vertex
        weight: Edge weight
    """

    to: Handle
    weight: W
