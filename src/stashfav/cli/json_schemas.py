"""Pydantic models for JSON output schemas.

`stashfav list --json` and `stashfav favorites --json` emit these so that an
editor integration can render the read model without parsing text output.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from stashfav.core.stash_favorites import StashEntry, StashListing


class StashEntryInfo(BaseModel):
    """One stash in the JSON read model.

    Attributes:
        id: Stash identifier, e.g. "stash@{0}"
        index: Position in the stash list (0 = newest)
        description: Text git shows after the identifier
        is_favorite: Serialized as "isFavorite"
    """

    model_config = ConfigDict(strict=True)

    id: str
    index: int = Field(..., ge=0)
    description: str
    is_favorite: bool = Field(..., serialization_alias="isFavorite")

    @classmethod
    def from_entry(cls, entry: StashEntry) -> "StashEntryInfo":
        return cls(
            id=entry.stash_id,
            index=entry.ordinal,
            description=entry.description,
            is_favorite=entry.is_favorite,
        )


class StashListResponse(BaseModel):
    """JSON response schema for `list --json` and `favorites --json`.

    Attributes:
        type: Always "stash-list"
        stashes: Entries in stash list order
        error: Backend error message when the stash list could not be read
    """

    model_config = ConfigDict(strict=True)

    type: Literal["stash-list"] = "stash-list"
    stashes: list[StashEntryInfo]
    error: str | None = None

    @classmethod
    def from_listing(cls, listing: StashListing) -> "StashListResponse":
        return cls(
            stashes=[StashEntryInfo.from_entry(entry) for entry in listing.entries],
            error=listing.error,
        )
