"""Edge weight extraction shared by all graph algorithms."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any

__all__ = ["WeightedEdge", "get_weight"]


class WeightedEdge(ABC):
    """Base class for user-defined edges that carry a weight."""

    @abstractmethod
    def get_weight(self) -> Any:
        """Return the weight of this edge."""


def get_weight(edge: Any) -> Any:
    """Return the weight of an edge.

    A :class:`WeightedEdge` reports its own weight, a real number is its own
    weight, and any other edge has unit weight.
    """
    if isinstance(edge, WeightedEdge):
        return edge.get_weight()
    if isinstance(edge, numbers.Real):
        return edge
    return 1