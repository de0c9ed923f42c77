"""Export utilities for search results."""

from __future__ import annotations

from collections.abc import Iterable

from collection_browser.models import Artwork, SearchPage


def export_json(page: SearchPage, indent: int = 2) -> str:
    """Serialize a page to JSON, using the API's field names."""
    return page.model_dump_json(indent=indent, by_alias=True)


def export_markdown(
    artworks: Iterable[Artwork],
    favorites: Iterable[str] | None = None,
) -> str:
    """Generate Markdown table of artworks; favorites get a star."""
    favorite_ids = set(favorites or ())
    header = "| # | Object number | Title | Maker | Image | Fav |"
    sep = "|---|---------------|-------|-------|-------|-----|"
    rows = []
    for i, artwork in enumerate(artworks, 1):
        image = (
            f"{artwork.image.width}x{artwork.image.height}" if artwork.image else "-"
        )
        star = "*" if artwork.id in favorite_ids else ""
        rows.append(
            f"| {i} | {artwork.id} | {_escape(artwork.title)} "
            f"| {_escape(artwork.maker)} | {image} | {star} |"
        )
    return "\n".join([header, sep] + rows)


def _escape(text: str) -> str:
    return text.replace("|", r"\|").replace("\n", " ")
