"""Rank model module."""
from enum import IntEnum, unique
from types import MappingProxyType


@unique
class Rank(IntEnum):
    """Canonical taxonomic ranks, ordered from least to most general.

    `EMPTY`, `UNKNOWN`, and `UNRANKED` sort below every real rank so that
    ranked levels compare naturally, e.g. `Rank.KINGDOM > Rank.PHYLUM` and
    `Rank.CLASS > Rank.SUBCLASS`.
    """

    EMPTY = 0
    UNKNOWN = 1
    UNRANKED = 2
    FORM = 3
    VARIETY = 4
    SUBSPECIES = 5
    SPECIES = 6
    COMPLEX = 7
    SUBSECTION = 8
    SECTION = 9
    SUBGENUS = 10
    GENUS = 11
    SUBTRIBE = 12
    TRIBE = 13
    SUPERTRIBE = 14
    SUBFAMILY = 15
    FAMILY = 16
    EPIFAMILY = 17
    SUPERFAMILY = 18
    ZOOSUBSECTION = 19
    ZOOSECTION = 20
    PARVORDER = 21
    INFRAORDER = 22
    SUBORDER = 23
    ORDER = 24
    SUPERORDER = 25
    SUBTERCLASS = 26
    INFRACLASS = 27
    SUBCLASS = 28
    CLASS = 29
    SUPERCLASS = 30
    SUBPHYLUM = 31
    PHYLUM = 32
    SUBKINGDOM = 33
    KINGDOM = 34
    EMPIRE = 35

    @property
    def is_ranked(self) -> bool:
        """True for a real rank that can be compared across hierarchies."""
        return self > Rank.UNRANKED

    @property
    def is_genus_or_lower(self) -> bool:
        return self.is_ranked and self <= Rank.GENUS


# Labels are matched exactly (case-sensitive). The vocabulary is the union of
# Catalogue of Life rank names and iNaturalist RANK_LEVELS:
# - https://github.com/inaturalist/inaturalist/blob/master/app/models/taxon.rb
RANK_LABELS = MappingProxyType(
    {
        "empire": Rank.EMPIRE,
        "domain": Rank.EMPIRE,
        "superkingdom": Rank.EMPIRE,
        "kingdom": Rank.KINGDOM,
        "subkingdom": Rank.SUBKINGDOM,
        "phylum": Rank.PHYLUM,
        "division": Rank.PHYLUM,
        "subphylum": Rank.SUBPHYLUM,
        "superclass": Rank.SUPERCLASS,
        "class": Rank.CLASS,
        "subclass": Rank.SUBCLASS,
        "sub-class": Rank.SUBCLASS,
        "infraclass": Rank.INFRACLASS,
        "subterclass": Rank.SUBTERCLASS,
        "superorder": Rank.SUPERORDER,
        "super-order": Rank.SUPERORDER,
        "order": Rank.ORDER,
        "suborder": Rank.SUBORDER,
        "sub-order": Rank.SUBORDER,
        "infraorder": Rank.INFRAORDER,
        "parvorder": Rank.PARVORDER,
        "zoosection": Rank.ZOOSECTION,
        "zoosubsection": Rank.ZOOSUBSECTION,
        "superfamily": Rank.SUPERFAMILY,
        "super-family": Rank.SUPERFAMILY,
        "epifamily": Rank.EPIFAMILY,
        "family": Rank.FAMILY,
        "subfamily": Rank.SUBFAMILY,
        "sub-family": Rank.SUBFAMILY,
        "supertribe": Rank.SUPERTRIBE,
        "tribe": Rank.TRIBE,
        "subtribe": Rank.SUBTRIBE,
        "genus": Rank.GENUS,
        "genushybrid": Rank.GENUS,
        "gen": Rank.GENUS,
        "subgenus": Rank.SUBGENUS,
        "section": Rank.SECTION,
        "subsection": Rank.SUBSECTION,
        "complex": Rank.COMPLEX,
        "species": Rank.SPECIES,
        "hybrid": Rank.SPECIES,
        "sp": Rank.SPECIES,
        "spp": Rank.SPECIES,
        "subspecies": Rank.SUBSPECIES,
        "sub-species": Rank.SUBSPECIES,
        "infraspecies": Rank.SUBSPECIES,
        "infrahybrid": Rank.SUBSPECIES,
        "trinomial": Rank.SUBSPECIES,
        "ssp": Rank.SUBSPECIES,
        "subsp": Rank.SUBSPECIES,
        "variety": Rank.VARIETY,
        "var": Rank.VARIETY,
        "form": Rank.FORM,
        "forma": Rank.FORM,
        "unranked": Rank.UNRANKED,
        # iNat's root taxon "Life"
        "stateofmatter": Rank.UNRANKED,
    }
)

STANDARD_RANKS = (
    Rank.KINGDOM,
    Rank.PHYLUM,
    Rank.CLASS,
    Rank.ORDER,
    Rank.FAMILY,
    Rank.GENUS,
)


def new_rank(label: str) -> Rank:
    """Get the canonical rank for a rank label, or `Rank.UNKNOWN`."""
    return RANK_LABELS.get(label, Rank.UNKNOWN)
