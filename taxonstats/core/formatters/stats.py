"""Stats formatter module."""
from ..models.stats import Stats

RANK_TITLES = (
    ("Kingdom", "kingdom", "kingdom_percentage"),
    ("Phylum", "phylum", "phylum_percentage"),
    ("Class", "class_", "class_percentage"),
    ("Order", "order", "order_percentage"),
    ("Family", "family", "family_percentage"),
    ("Genus", "genus", "genus_percentage"),
)


def format_percentage(percentage: float) -> str:
    return f"{percentage:.0%}"


def format_stats(stats: Stats) -> str:
    """Format stats as markdown lines."""
    if not stats.names_num:
        return "No statistics: fewer than two names classified to genus or lower."

    lines = [f"**Names:** {stats.names_num}"]
    main_taxon = stats.main_taxon
    if main_taxon.name:
        lines.append(
            f"**Main taxon:** {main_taxon.rank_str} {main_taxon.name} "
            f"({format_percentage(stats.main_taxon_percentage)})"
        )
    else:
        lines.append("**Main taxon:** none")
    for title, taxon_field, percentage_field in RANK_TITLES:
        taxon = getattr(stats, taxon_field)
        if taxon.name:
            percentage = getattr(stats, percentage_field)
            lines.append(
                f"**{title}:** {taxon.name} ({format_percentage(percentage)})"
            )
    if stats.kingdoms:
        kingdoms = ", ".join(
            f"{dist.name} {dist.names_num} ({format_percentage(dist.percentage)})"
            for dist in stats.kingdoms
        )
        lines.append(f"**Kingdoms:** {kingdoms}")
    return "\n".join(lines)
