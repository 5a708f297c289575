"""Calculate statistics for a group of classified names.

The names are expected to come from one classification tree. Statistics are
the distribution of the names across kingdoms, the most prevalent taxon of
each standard rank, and the lowest taxon that contains more than a given
fraction (always a majority) of the names.
"""
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Sequence, Tuple

from ..common import LOG
from .models.rank import Rank, STANDARD_RANKS, new_rank
from .models.stats import Stats, TaxonDist
from .models.taxon import Hierarchy, Taxon

DEFAULT_THRESHOLD = MIN_THRESHOLD = 0.5

# Stats fields holding the dominant taxon of each standard rank and its share:
RANK_FIELDS = {
    Rank.KINGDOM: ("kingdom", "kingdom_percentage"),
    Rank.PHYLUM: ("phylum", "phylum_percentage"),
    Rank.CLASS: ("class_", "class_percentage"),
    Rank.ORDER: ("order", "order_percentage"),
    Rank.FAMILY: ("family", "family_percentage"),
    Rank.GENUS: ("genus", "genus_percentage"),
}


@dataclass
class RankData:
    """Occurrences of taxa of one rank."""

    rank: Rank
    data: Counter = field(default_factory=Counter)
    total: int = 0


def classify_taxa(taxa: Iterable[Taxon]) -> List[Taxon]:
    """Copy taxa, giving a rank to each one that has none yet."""
    return [
        replace(taxon, rank=new_rank(taxon.rank_str))
        if taxon.rank == Rank.EMPTY
        else taxon
        for taxon in taxa
    ]


def extract_taxa(hierarchies: Iterable[Hierarchy]) -> List[List[Taxon]]:
    """Collect classified taxa of each name classified to genus or lower.

    Higher ranks are not used to select names, since their meaning can
    differ from one classification to another.
    """
    result = []
    for hierarchy in hierarchies:
        taxa = classify_taxa(hierarchy.taxa())
        if any(taxon.rank.is_genus_or_lower for taxon in taxa):
            result.append(taxa)
        else:
            LOG.debug(
                "Dropped hierarchy not classified to genus or lower: %s",
                "|".join(taxon.name for taxon in taxa),
            )
    return result


def aggregate_ranks(taxa_lists: Iterable[Sequence[Taxon]]) -> List[RankData]:
    """Count occurrences of taxa per rank, omitting ranks with none."""
    ranks = [RankData(rank) for rank in Rank]
    for taxa in taxa_lists:
        for taxon in taxa:
            rank_data = ranks[taxon.rank]
            rank_data.data[taxon] += 1
            rank_data.total += 1
    return [rank_data for rank_data in ranks if rank_data.total]


def max_taxon(names_num: int, rank_data: RankData) -> Tuple[Taxon, float]:
    """Get the taxon with most names in the rank, and its share of names.

    Of taxa tied for most names, the one with the first name alphabetically
    is taken.
    """
    if not rank_data.data:
        return Taxon(), 0.0
    taxon, count = min(
        rank_data.data.items(), key=lambda item: (-item[1], item[0].name)
    )
    if not taxon.name:
        return Taxon(), 0.0
    return taxon, count / names_num


def taxon_dist(names_num: int, rank_data: RankData) -> Tuple[TaxonDist, ...]:
    """Get the distribution of names across taxa of the rank."""
    return tuple(
        TaxonDist(names_num=count, name=taxon.name, percentage=count / names_num)
        for taxon, count in sorted(
            rank_data.data.items(), key=lambda item: (-item[1], item[0].name)
        )
    )


def is_max_taxon(dist: Sequence[TaxonDist], percentage: float) -> bool:
    """True if exactly one taxon of the distribution has the percentage."""
    return sum(1 for taxon in dist if taxon.percentage == percentage) == 1


def calc_stats(names_num: int, ranks: Sequence[RankData], threshold: float) -> Stats:
    """Assemble stats from per-rank occurrences of taxa."""
    fields: Dict[str, object] = {"names_num": names_num}
    main_taxon = None

    # from the most specific rank to the most general
    for rank_data in ranks:
        if not rank_data.rank.is_ranked:
            continue
        taxon, percentage = max_taxon(names_num, rank_data)
        if rank_data.rank in STANDARD_RANKS:
            dist = taxon_dist(names_num, rank_data)
            # A tie for the most names has no dominant taxon.
            if taxon.name and is_max_taxon(dist, percentage):
                taxon_field, percentage_field = RANK_FIELDS[rank_data.rank]
                fields[taxon_field] = taxon
                fields[percentage_field] = percentage
            if rank_data.rank == Rank.KINGDOM:
                fields["kingdoms"] = dist
        if main_taxon is None and percentage > threshold:
            main_taxon = taxon
            fields["main_taxon"] = taxon
            fields["main_taxon_percentage"] = percentage

    LOG.debug("Main taxon of %d names: %r", names_num, main_taxon)
    return Stats(**fields)


def compute_stats(
    hierarchies: Iterable[Hierarchy], threshold: float = DEFAULT_THRESHOLD
) -> Stats:
    """Get stats for a group of names.

    Parameters
    ----------
    hierarchies: Iterable[Hierarchy]
        The classification of each name.
    threshold: float, optional
        Fraction of names the main taxon must exceed. Values lower than
        0.5 are raised to 0.5, so the main taxon is always a majority.

    Returns
    -------
    Stats
        The stats, empty if fewer than two names are classified to genus
        or lower.
    """
    threshold = max(threshold, MIN_THRESHOLD)
    taxa_lists = extract_taxa(hierarchies)
    if len(taxa_lists) < 2:
        return Stats()
    ranks = aggregate_ranks(taxa_lists)
    return calc_stats(len(taxa_lists), ranks, threshold)
