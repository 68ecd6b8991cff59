from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec


class RandomPaletteInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: Literal["json", "xml"] = Field(
        default="json", description="The format of the response."
    )
    showPaletteWidths: bool | None = Field(
        default=None, description="Include the relative width of each color."
    )


tool = ToolSpec(
    name="fetch_random_palette",
    description="Fetch a random color palette from COLOURlovers API.",
    endpoint=EndpointConfig(path="palettes/random", args_schema=RandomPaletteInput),
    action="fetching the random palette",
    intent="Pick a random palette for inspiration.",
    schema_notes="Takes no required input. Returns a one element list.",
)
