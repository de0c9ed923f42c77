"""Dev CLI for collection-browser. Usage: python -m collection_browser <query> [--page N]"""

from __future__ import annotations

import asyncio
import sys

USAGE = "Usage: python -m collection_browser <query> [--page N]"


def _parse_args(argv: list[str]) -> tuple[str, int]:
    page = 1
    words: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--page":
            value = next(args, None)
            if value is None or not value.isdigit() or int(value) < 1:
                raise ValueError("--page expects a positive integer")
            page = int(value)
        else:
            words.append(arg)
    return " ".join(words), page


def main() -> None:
    if len(sys.argv) < 2:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    try:
        query, page = _parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}\n{USAGE}", file=sys.stderr)
        sys.exit(1)

    try:
        result, favorites = asyncio.run(_run(query, page))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    from collection_browser import export_markdown

    print(export_markdown(result.items, favorites=favorites))
    print(f"\nPage {page}: {len(result.items)} of {result.total_count} artworks")


async def _run(query: str, page: int):
    from collection_browser import search
    from collection_browser.config import load_config
    from collection_browser.favorites import FavoriteStore, JsonFileStore

    config = load_config()
    favorites = FavoriteStore(JsonFileStore(config.favorites_path))
    result = await search(query or None, config=config, page=page)
    return result, favorites.favorite_ids


if __name__ == "__main__":
    main()
