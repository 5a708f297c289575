"""Tests for stats formatter."""
# pylint: disable=missing-class-docstring, no-self-use, missing-function-docstring
# pylint: disable=redefined-outer-name
import pytest

from ..formatters.stats import format_percentage, format_stats
from ..models.rank import Rank
from ..models.stats import Stats, TaxonDist
from ..models.taxon import Taxon


@pytest.fixture
def stats():
    return Stats(
        names_num=4,
        kingdoms=(
            TaxonDist(names_num=3, name="Animalia", percentage=0.75),
            TaxonDist(names_num=1, name="Plantae", percentage=0.25),
        ),
        kingdom=Taxon(id="N", name="Animalia", rank_str="kingdom", rank=Rank.KINGDOM),
        kingdom_percentage=0.75,
        class_=Taxon(id="V2", name="Aves", rank_str="class", rank=Rank.CLASS),
        class_percentage=0.5,
        main_taxon=Taxon(id="N", name="Animalia", rank_str="kingdom", rank=Rank.KINGDOM),
        main_taxon_percentage=0.75,
    )


class TestFormatStats:
    def test_format_percentage(self):
        assert format_percentage(0.5507246) == "55%"
        assert format_percentage(1.0) == "100%"

    def test_format_stats(self, stats):
        assert format_stats(stats) == (
            "**Names:** 4\n"
            "**Main taxon:** kingdom Animalia (75%)\n"
            "**Kingdom:** Animalia (75%)\n"
            "**Class:** Aves (50%)\n"
            "**Kingdoms:** Animalia 3 (75%), Plantae 1 (25%)"
        )

    def test_format_every_rank(self):
        stats = Stats(
            names_num=2,
            kingdom=Taxon(name="Animalia", rank=Rank.KINGDOM),
            kingdom_percentage=1.0,
            phylum=Taxon(name="Chordata", rank=Rank.PHYLUM),
            phylum_percentage=1.0,
            class_=Taxon(name="Aves", rank=Rank.CLASS),
            class_percentage=1.0,
            order=Taxon(name="Strigiformes", rank=Rank.ORDER),
            order_percentage=1.0,
            family=Taxon(name="Strigidae", rank=Rank.FAMILY),
            family_percentage=1.0,
            genus=Taxon(name="Bubo", rank=Rank.GENUS),
            genus_percentage=0.5,
        )
        assert format_stats(stats).splitlines()[2:] == [
            "**Kingdom:** Animalia (100%)",
            "**Phylum:** Chordata (100%)",
            "**Class:** Aves (100%)",
            "**Order:** Strigiformes (100%)",
            "**Family:** Strigidae (100%)",
            "**Genus:** Bubo (50%)",
        ]

    def test_format_no_main_taxon(self):
        formatted = format_stats(Stats(names_num=2))
        assert formatted == "**Names:** 2\n**Main taxon:** none"

    def test_format_empty_stats(self):
        assert format_stats(Stats()).startswith("No statistics")
