from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec


class ColorsInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lover: str = Field(description="The COLOURlover username.")
    hueRange: str | None = Field(
        default=None,
        description="Hue range for filtering colors, e.g. '5,59' (0-359).",
    )
    briRange: str | None = Field(
        default=None,
        description="Brightness range for filtering colors, e.g. '20,80' (0-99).",
    )
    keywords: str | None = Field(
        default=None, description="Keywords for searching colors."
    )
    keywordsExact: int = Field(
        default=0, ge=0, le=1, description="Whether to match keywords exactly (0 or 1)."
    )
    orderCol: Literal["dateCreated", "score", "name", "numVotes", "numViews"] = Field(
        default="name", description="The column to order results by."
    )
    SortBy: Literal["ASC", "DESC"] = Field(default="ASC", description="The sort order.")
    numResults: int = Field(
        default=20, ge=1, le=100, description="The number of results to return (max 100)."
    )
    ResultOffset: int = Field(
        default=0, ge=0, description="The offset for paging results."
    )
    format: Literal["json", "xml"] = Field(
        default="json", description="The format of the response."
    )


tool = ToolSpec(
    name="get_colors",
    description="Retrieve colors from the COLOURlovers API.",
    endpoint=EndpointConfig(path="colors", args_schema=ColorsInput),
    action="retrieving colors",
    intent="Search a lover's colors by hue, brightness or keyword.",
    schema_notes=(
        "Requires 'lover'. Paging and sort defaults are always sent; "
        "hueRange, briRange and keywords only when given."
    ),
)
