from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec


class PalettesInput(BaseModel):
    """Only ``lover`` and ``format`` are always sent; the upstream API applies
    its own defaults (orderCol=name, sortBy=ASC, numResults=20) to the rest."""

    model_config = ConfigDict(extra="forbid")

    lover: str = Field(description="The user whose palettes to fetch.")
    format: Literal["json", "xml"] = Field(
        default="json", description="Response format."
    )
    hueOption: str | None = Field(
        default=None,
        description="Hue filter: comma separated list of yellow, orange, red, green, violet, blue.",
    )
    hex: str | None = Field(
        default=None,
        description="A valid hex value or comma separated list of hex values for filtering.",
    )
    hex_logic: Literal["AND", "OR"] | None = Field(
        default=None, description="Logic for hex comparison."
    )
    keywords: str | None = Field(
        default=None, description="Keywords for searching palettes."
    )
    keywordExact: int | None = Field(
        default=None, ge=0, le=1, description="Exact match flag (0 or 1)."
    )
    orderCol: Literal["dateCreated", "score", "name", "numVotes", "numViews"] | None = (
        Field(default=None, description="Column to order results by.")
    )
    sortBy: Literal["ASC", "DESC"] | None = Field(
        default=None, description="Sort order."
    )
    numResults: int | None = Field(
        default=None, ge=1, le=100, description="Maximum number of results to return."
    )
    resultOffset: int | None = Field(
        default=None, ge=0, description="Offset for paging results."
    )
    showPaletteWidths: bool | None = Field(
        default=None, description="Include the relative width of each color."
    )


tool = ToolSpec(
    name="fetch_palettes",
    description="Fetch palettes from the COLOURlovers API.",
    endpoint=EndpointConfig(path="palettes", args_schema=PalettesInput),
    action="fetching palettes",
    intent="Search a lover's palettes by hue, hex values or keyword.",
    schema_notes="Requires 'lover'. Optional filters are sent only when given.",
)
