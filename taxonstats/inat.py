"""Module to get classifications of iNat taxa."""
from typing import Iterable, List

from pyinaturalist import get_taxa_by_id
from pyinaturalist.models import Taxon as PyiNatTaxon

from .common import LOG
from .core.models.taxon import Hierarchy, Taxon


def inat_taxon(taxon: PyiNatTaxon) -> Taxon:
    """Get an unclassified Taxon from an iNat taxon."""
    return Taxon(id=str(taxon.id), name=taxon.name or "", rank_str=taxon.rank or "")


class INatHierarchy(Hierarchy):
    """Classification of an iNat taxon: its ancestors, then the taxon itself."""

    def __init__(self, taxon: PyiNatTaxon):
        self.taxon = taxon

    def taxa(self):
        ancestors = self.taxon.ancestors or []
        return [inat_taxon(ancestor) for ancestor in ancestors] + [
            inat_taxon(self.taxon)
        ]


def get_hierarchies(taxon_ids: Iterable[int], **kwargs) -> List[INatHierarchy]:
    """Get classifications of the iNat taxa with the given ids.

    Keyword arguments are passed through to `pyinaturalist.get_taxa_by_id`.
    """
    _taxon_ids = [int(taxon_id) for taxon_id in taxon_ids]
    if not _taxon_ids:
        return []
    LOG.info("get_taxa_by_id(%s)", repr(_taxon_ids))
    response = get_taxa_by_id(_taxon_ids, **kwargs)
    taxa = PyiNatTaxon.from_json_list(response)
    missing = set(_taxon_ids) - {taxon.id for taxon in taxa}
    if missing:
        LOG.info("Taxa not found: %s", ", ".join(map(str, sorted(missing))))
    return [INatHierarchy(taxon) for taxon in taxa]
