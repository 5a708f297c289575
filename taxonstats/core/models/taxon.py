"""Taxon model module."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from .rank import Rank


# pylint: disable=invalid-name
@dataclass(frozen=True)
class Taxon:
    """A taxon from one classification hierarchy.

    Taxa are the same aggregation key when their name and rank are equal;
    `id` and `rank_str` are carried along for reporting only.
    """

    id: str = field(default="", compare=False)
    name: str = ""
    rank_str: str = field(default="", compare=False)
    rank: Rank = Rank.EMPTY


class Hierarchy(ABC):
    """Source of the classification of one name."""

    @abstractmethod
    def taxa(self) -> Sequence[Taxon]:
        """Taxa from the most general to the most specific."""
