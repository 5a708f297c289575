"""Taxonomic distribution statistics for groups of classified names."""
from .core.models.rank import Rank, new_rank
from .core.models.stats import Stats, TaxonDist
from .core.models.taxon import Hierarchy, Taxon
from .core.stats import compute_stats

__all__ = [
    "Hierarchy",
    "Rank",
    "Stats",
    "Taxon",
    "TaxonDist",
    "compute_stats",
    "new_rank",
]
