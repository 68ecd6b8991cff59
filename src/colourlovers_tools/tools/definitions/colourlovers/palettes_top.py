from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec


class TopPalettesInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lover: str | None = Field(
        default=None, description="The username of the COLOURlover."
    )
    format: Literal["json", "xml"] = Field(
        default="json", description="The format of the response."
    )
    numResults: int = Field(
        default=20, ge=1, le=100, description="The maximum number of results to return."
    )
    resultOffset: int = Field(default=0, ge=0, description="The offset for paging results.")
    showPaletteWidths: bool | None = Field(
        default=None, description="Include the relative width of each color."
    )


tool = ToolSpec(
    name="get_top_palettes",
    description="Retrieve the top palettes from COLOURlovers.",
    endpoint=EndpointConfig(path="palettes/top", args_schema=TopPalettesInput),
    action="retrieving top palettes",
    intent="List the highest rated palettes, optionally for one lover.",
    schema_notes="No required fields. Returns a JSON list of palettes.",
)
