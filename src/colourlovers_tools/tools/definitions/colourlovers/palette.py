from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec


class PaletteInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    paletteId: int = Field(description="The ID of the palette to retrieve.")
    format: Literal["json", "xml"] = Field(
        default="json", description="The format of the response."
    )
    showPaletteWidths: bool | None = Field(
        default=None, description="Include the relative width of each color."
    )


tool = ToolSpec(
    name="get_palette",
    description="Retrieve a palette from the COLOURlovers API.",
    endpoint=EndpointConfig(path="palette/{paletteId}", args_schema=PaletteInput),
    action="retrieving the palette",
    intent="Fetch one palette and its colors by numeric id.",
    schema_notes="Requires integer 'paletteId'.",
)
