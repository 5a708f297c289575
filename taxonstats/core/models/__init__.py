"""Models for taxonomic statistics."""
