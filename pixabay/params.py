# =============================================================================
# pixabay/params.py  —  Tool Parameter Models & Query Building
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. Defines one pydantic model per tool shape.  An incoming argument map
#      is parsed into one of these before anything touches the network, so
#      a bad enum value, an out-of-range per_page or an unknown field is
#      rejected with a readable message.
#   2. Turns a validated model into the flat {name: text} mapping that goes
#      into the query string.
#
# BOUNDS POLICY:
#   Out-of-range values (per_page outside 3-200, page < 1, negative sizes,
#   q longer than 100 characters) are REJECTED, never clamped.  A caller
#   asking for per_page=500 gets an error explaining the limit.
#
# EMPTY VALUES:
#   None and "" mean "not set".  They are dropped BEFORE validation, so an
#   empty image_type is treated like an absent one rather than failing the
#   enum check, and they are never sent upstream.
#
# The gateway descriptors come from these models (model_json_schema) and the
# FastMCP tool signatures reuse the same field annotations, so both the
# gateway and the MCP server advertise and enforce one set of rules.
# =============================================================================

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

ImageType = Literal["all", "photo", "illustration", "vector"]
Orientation = Literal["all", "horizontal", "vertical"]
VideoType = Literal["all", "film", "animation"]
Order = Literal["popular", "latest"]

MAX_QUERY_LENGTH = 100
MIN_PER_PAGE = 3
MAX_PER_PAGE = 200


def is_unset(value: Any) -> bool:
    """True for values that must never be sent: None and the empty string."""
    return value is None or value == ""


def to_query_value(value: Any) -> str:
    """Render one parameter value the way Pixabay expects it.

    Booleans become "true"/"false" (Python's str() would give "True"),
    numbers become decimal text, everything else goes through str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any]) -> dict[str, str]:
    """Drop unset entries and stringify the rest."""
    return {name: to_query_value(value) for name, value in params.items() if not is_unset(value)}


# -----------------------------------------------------------------------------
# Base model — shared config and the "drop empties" pre-pass
# -----------------------------------------------------------------------------
class ToolParams(BaseModel):
    """Common behaviour for every tool's argument model."""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _drop_unset(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {name: value for name, value in data.items() if not is_unset(value)}
        return data

    def to_query(self) -> dict[str, str]:
        """The outbound query parameters, WITHOUT the credential."""
        return build_query(self.model_dump(exclude_none=True))


# -----------------------------------------------------------------------------
# Field annotations — shared with the FastMCP signatures in tools/mcp_server.py
# -----------------------------------------------------------------------------
# Enum fields also admit "" so an MCP caller may send an empty value; it is
# dropped by _drop_unset like any other empty string.
Query = Annotated[
    Optional[str],
    Field(max_length=MAX_QUERY_LENGTH, description="Search term. Max 100 characters. Omit to browse everything."),
]
Lang = Annotated[
    Optional[str],
    Field(description="Language code of the search term (e.g. 'en', 'de', 'fr'). Pixabay default: 'en'."),
]
SearchId = Annotated[
    Optional[str], Field(min_length=1, description="Retrieve an individual item by its Pixabay ID.")
]
Category = Annotated[
    Optional[str],
    Field(description="Filter by category (backgrounds, fashion, nature, science, animals, travel, ...)."),
]
MinWidth = Annotated[Optional[int], Field(ge=0, description="Minimum width in pixels. Pixabay default: 0.")]
MinHeight = Annotated[Optional[int], Field(ge=0, description="Minimum height in pixels. Pixabay default: 0.")]
EditorsChoice = Annotated[
    Optional[bool], Field(description="Only items that received an Editor's Choice award. Pixabay default: false.")
]
SafeSearch = Annotated[
    Optional[bool], Field(description="Only items suitable for all ages. Pixabay default: false.")
]
SortOrder = Annotated[
    Optional[Union[Order, Literal[""]]], Field(description="Sort order. Pixabay default: 'popular'.")
]
Page = Annotated[Optional[int], Field(ge=1, description="Page number, starting at 1.")]
PerPage = Annotated[
    Optional[int],
    Field(ge=MIN_PER_PAGE, le=MAX_PER_PAGE, description="Results per page (3-200). Pixabay default: 20."),
]
ImageTypeFilter = Annotated[
    Optional[Union[ImageType, Literal[""]]], Field(description="Filter by image type. Pixabay default: 'all'.")
]
OrientationFilter = Annotated[
    Optional[Union[Orientation, Literal[""]]], Field(description="Image orientation. Pixabay default: 'all'.")
]
Colors = Annotated[
    Optional[str],
    Field(
        description=(
            "Comma-separated color filter: grayscale, transparent, red, orange, yellow, green, "
            "turquoise, blue, lilac, pink, white, gray, black, brown."
        )
    ),
]
VideoTypeFilter = Annotated[
    Optional[Union[VideoType, Literal[""]]], Field(description="Filter by video type. Pixabay default: 'all'.")
]
MediaId = Annotated[str, Field(min_length=1, description="Pixabay ID of the item.")]


# -----------------------------------------------------------------------------
# Fields shared by image and video search
# -----------------------------------------------------------------------------
class _SearchParams(ToolParams):
    q: Query = None
    lang: Lang = None
    id: SearchId = None
    category: Category = None
    min_width: MinWidth = None
    min_height: MinHeight = None
    editors_choice: EditorsChoice = None
    safesearch: SafeSearch = None
    order: SortOrder = None
    page: Page = None
    per_page: PerPage = None


class ImageSearchParams(_SearchParams):
    """Arguments of search_images."""

    image_type: ImageTypeFilter = None
    orientation: OrientationFilter = None
    colors: Colors = None


class VideoSearchParams(_SearchParams):
    """Arguments of search_videos."""

    video_type: VideoTypeFilter = None


class MediaIdParams(ToolParams):
    """Arguments of get_image_by_id / get_video_by_id."""

    id: MediaId


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line per field."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(piece) for piece in err.get("loc", ())) or "arguments"
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)
