"""Core data models for the collection browser.

All Pydantic models are defined here as the single source of truth.
Wire names from the collection API are mapped with field aliases, so
``Artwork.model_validate(raw)`` accepts an ``artObjects`` entry as-is.
"""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Artwork records
# ---------------------------------------------------------------------------

class ImageRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    guid: str | None = None
    url: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @field_validator("url")
    @classmethod
    def _require_absolute(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(f"image url must be absolute: {value!r}")
        return value

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


class Artwork(BaseModel):
    """A single collection object.

    Immutable once built. Two artworks are equal when their ids are equal,
    whatever the other fields say.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="objectNumber")
    title: str
    maker: str = Field(alias="principalOrFirstMaker")
    image: ImageRef | None = Field(default=None, alias="webImage")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artwork):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# ---------------------------------------------------------------------------
# Search results
# ---------------------------------------------------------------------------

class CollectionResponse(BaseModel):
    """Body of a ``/collection`` response."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(ge=0)
    art_objects: list[Artwork] = Field(alias="artObjects")


class SearchPage(BaseModel):
    items: list[Artwork]
    total_count: int = Field(ge=0)
