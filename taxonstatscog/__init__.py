"""TaxonStatsCog init."""
from redbot.core.bot import Red
from redbot.core.utils import get_end_user_data_statement

from .taxonstatscog import TaxonStatsCog

__red_end_user_data_statement__ = get_end_user_data_statement(__file__)


async def setup(bot: Red) -> None:
    """Load taxon stats cog."""
    cog = TaxonStatsCog(bot)
    r = bot.add_cog(cog)
    if r is not None:
        await r
