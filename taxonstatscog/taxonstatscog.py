"""A cog for taxonomic statistics of groups of iNat taxa."""
import asyncio
from functools import partial
from typing import Optional

from redbot.core import checks, commands, Config

from taxonstats.common import LOG
from taxonstats.core.formatters.stats import format_stats
from taxonstats.core.stats import DEFAULT_THRESHOLD, compute_stats
from taxonstats.inat import get_hierarchies

from .embeds import MAX_EMBED_DESCRIPTION_LEN, make_embed, sorry

REQUEST_TIMEOUT = 20


class TaxonStatsCog(commands.Cog):
    """Commands provided by `taxonstatscog`."""

    def __init__(self, bot):
        self.bot = bot
        self.config = Config.get_conf(self, identifier=4187)
        self.config.register_global(threshold=DEFAULT_THRESHOLD)

    async def red_delete_data_for_user(self, **kwargs):
        """Nothing to delete."""
        return

    async def get_hierarchies(self, taxon_ids):
        """Get classifications of taxa without blocking the bot."""
        future = asyncio.get_running_loop().run_in_executor(
            None, partial(get_hierarchies, taxon_ids)
        )
        try:
            return await asyncio.wait_for(future, timeout=REQUEST_TIMEOUT)
        except asyncio.TimeoutError as err:
            raise LookupError("iNaturalist API request timed out") from err

    @commands.group(invoke_without_command=True)
    @checks.bot_has_permissions(embed_links=True)
    async def taxonstats(self, ctx, *taxon_ids: int):
        """Kingdoms and main taxon of iNat taxa.

        - *taxon_ids* are two or more iNat taxon ids of genus rank or lower.
        - The main taxon is the lowest one containing more than the
          configured `threshold` of the taxa.
        """
        if not taxon_ids:
            await ctx.send_help()
            return
        threshold = await self.config.threshold()
        try:
            async with ctx.typing():
                hierarchies = await self.get_hierarchies(taxon_ids)
        except LookupError as err:
            await ctx.send(embed=sorry(apology=str(err)))
            return
        stats = compute_stats(hierarchies, threshold)
        LOG.info(
            "taxonstats for %d taxa (%d counted): %s",
            len(taxon_ids),
            stats.names_num,
            stats.main_taxon.name,
        )
        await ctx.send(
            embed=make_embed(
                title="Taxon stats",
                description=format_stats(stats)[:MAX_EMBED_DESCRIPTION_LEN],
            )
        )

    @taxonstats.command(name="threshold")
    @checks.is_owner()
    async def taxonstats_threshold(self, ctx, value: Optional[float] = None):
        """Show or set the main taxon threshold.

        The threshold is a fraction between 0 and 1. Values below 0.5
        are treated as 0.5, so the main taxon always contains a majority.
        """
        if value is None:
            threshold = await self.config.threshold()
            await ctx.send(f"Main taxon threshold is {threshold}.")
            return
        if not 0 <= value <= 1:
            await ctx.send(embed=sorry(apology="Threshold must be between 0 and 1."))
            return
        await self.config.threshold.set(value)
        await ctx.send(f"Main taxon threshold set to {value}.")
