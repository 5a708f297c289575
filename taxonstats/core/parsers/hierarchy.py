"""Delimited text hierarchy parser module.

A classification is given as three parallel delimited strings: the names of
the taxa, their ranks, and their ids, e.g.

    Biota|Animalia|Chordata|Aves|Strigiformes|Strigidae|Bubo|Bubo bubo
    unranked|kingdom|phylum|class|order|family|genus|species
    5T6MX|N|CH2|V2|466|GQX|3DQQ|NKSD
"""
import csv
from typing import List, Sequence, Tuple

from ..models.taxon import Hierarchy, Taxon

DELIMITER = "|"


class ClassifiedName(Hierarchy):
    """Classification of a name parsed from text."""

    def __init__(self, taxa: Sequence[Taxon] = ()):
        self._taxa: Tuple[Taxon, ...] = tuple(taxa)

    def taxa(self):
        return self._taxa

    def __repr__(self):
        return f"ClassifiedName({DELIMITER.join(taxon.name for taxon in self._taxa)!r})"


def parse_hierarchy(
    names: str, ranks: str, ids: str, delimiter: str = DELIMITER
) -> ClassifiedName:
    """Parse a classification from delimited names, ranks, and ids.

    A classification of fewer than two names, or with fewer ranks or ids
    than names, is parsed as an empty classification.
    """
    _names = names.split(delimiter)
    _ranks = ranks.split(delimiter)
    _ids = ids.split(delimiter)
    if len(_names) < 2 or len(_names) > len(_ranks) or len(_names) > len(_ids):
        return ClassifiedName()
    return ClassifiedName(
        Taxon(id=_id, name=name, rank_str=rank)
        for name, rank, _id in zip(_names, _ranks, _ids)
    )


def read_csv(path) -> List[ClassifiedName]:
    """Read classifications from rows of names, ranks, and ids."""
    with open(path, newline="", encoding="utf-8") as csv_file:
        return [
            parse_hierarchy(*row[:3]) for row in csv.reader(csv_file) if len(row) >= 3
        ]


def read_records(path) -> List[ClassifiedName]:
    """Read classifications from records of three lines: ids, names, ranks."""
    hierarchies = []
    fields: List[str] = []
    with open(path, encoding="utf-8") as text_file:
        for line in text_file:
            line = line.strip().strip('"')
            if not line:
                continue
            fields.append(line)
            if len(fields) == 3:
                ids, names, ranks = fields
                hierarchies.append(parse_hierarchy(names, ranks, ids))
                fields = []
    return hierarchies
