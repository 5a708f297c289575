"""Module to make embeds."""
import discord

EMBED_COLOR = 0x90EE90
MAX_EMBED_DESCRIPTION_LEN = 2048


def make_embed(**kwargs):
    """Make a standard embed for this cog."""
    return discord.Embed(color=EMBED_COLOR, **kwargs)


def sorry(apology="I don't understand", title="Sorry"):
    """Notify user their request could not be satisfied."""
    return make_embed(title=title, description=apology)
