"""Stats model module."""
from dataclasses import dataclass
from typing import Tuple

from .taxon import Taxon


@dataclass(frozen=True)
class TaxonDist:
    """How many of the names belong to one taxon of a rank."""

    names_num: int
    name: str
    percentage: float


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class Stats:
    """Statistics for a group of classified names.

    Only names classified to genus or lower are counted in `names_num`.
    Each `*_percentage` is a value between 0 and 1. A rank without a single
    most prevalent taxon (no data, or a tie for the maximum) has an empty
    `Taxon()` and a percentage of 0.

    `main_taxon` is the most specific taxon containing more than the
    requested threshold of the names.

    `kingdoms` holds the distribution of the names across all kingdoms
    found, also when no single kingdom is most prevalent.
    """

    names_num: int = 0
    kingdoms: Tuple[TaxonDist, ...] = ()
    kingdom: Taxon = Taxon()
    kingdom_percentage: float = 0.0
    phylum: Taxon = Taxon()
    phylum_percentage: float = 0.0
    class_: Taxon = Taxon()
    class_percentage: float = 0.0
    order: Taxon = Taxon()
    order_percentage: float = 0.0
    family: Taxon = Taxon()
    family_percentage: float = 0.0
    genus: Taxon = Taxon()
    genus_percentage: float = 0.0
    main_taxon: Taxon = Taxon()
    main_taxon_percentage: float = 0.0
