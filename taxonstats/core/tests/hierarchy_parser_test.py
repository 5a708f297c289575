"""Tests for hierarchy parser."""
# pylint: disable=missing-class-docstring, no-self-use, missing-function-docstring
# pylint: disable=redefined-outer-name
import os

import pytest

from ..models.rank import Rank
from ..models.taxon import Taxon
from ..parsers.hierarchy import parse_hierarchy, read_csv, read_records

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def bubo():
    return parse_hierarchy(
        "Biota|Animalia|Chordata|Aves|Strigiformes|Strigidae|Striginae|Bubo|Bubo bubo",
        "unranked|kingdom|phylum|class|order|family|subfamily|genus|species",
        "5T6MX|N|CH2|V2|466|GQX|KDK|3DQQ|NKSD",
    )


class TestParseHierarchy:
    def test_taxa_in_order(self, bubo):
        taxa = bubo.taxa()
        assert len(taxa) == 9
        assert taxa[0] == Taxon(name="Biota")
        assert taxa[1].id == "N"
        assert taxa[1].rank_str == "kingdom"
        assert taxa[-1].name == "Bubo bubo"

    def test_taxa_are_unclassified(self, bubo):
        assert all(taxon.rank == Rank.EMPTY for taxon in bubo.taxa())

    def test_single_name_is_empty(self):
        assert not parse_hierarchy("Animalia", "kingdom", "N").taxa()

    def test_missing_ranks_is_empty(self):
        assert not parse_hierarchy("Animalia|Chordata", "kingdom", "N|CH2").taxa()

    def test_missing_ids_is_empty(self):
        assert not parse_hierarchy("Animalia|Chordata", "kingdom|phylum", "N").taxa()

    def test_extra_ranks_are_ignored(self):
        taxa = parse_hierarchy(
            "Animalia|Chordata", "kingdom|phylum|class", "N|CH2|V2"
        ).taxa()
        assert [taxon.rank_str for taxon in taxa] == ["kingdom", "phylum"]

    def test_delimiter(self):
        taxa = parse_hierarchy("Animalia;Chordata", "kingdom;phylum", "N;CH2", ";").taxa()
        assert [taxon.name for taxon in taxa] == ["Animalia", "Chordata"]


class TestReaders:
    def test_read_csv(self):
        hierarchies = read_csv(os.path.join(DATA_DIR, "molluscs.csv"))
        assert len(hierarchies) == 69
        for hierarchy in hierarchies:
            assert len(hierarchy.taxa()) == 8

    def test_read_records(self):
        hierarchies = read_records(os.path.join(DATA_DIR, "fifty_fifty.txt"))
        assert len(hierarchies) == 4
        assert hierarchies[1].taxa()[-1].name == "Puma concolor"
        assert hierarchies[1].taxa()[4].rank_str == "subclass"

    def test_missing_file(self):
        with pytest.raises(OSError):
            read_csv(os.path.join(DATA_DIR, "missing.csv"))
