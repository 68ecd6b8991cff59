from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec


class TopColorsInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lover: str | None = Field(
        default=None, description="Only return colors loved by this user."
    )
    format: Literal["json", "xml"] = Field(
        default="json", description="The format of the response."
    )
    numResults: int = Field(
        default=20, ge=1, le=100, description="The maximum number of results to return."
    )
    ResultOffset: int = Field(default=0, ge=0, description="The result offset for paging.")


tool = ToolSpec(
    name="get_top_colors",
    description="Retrieve the top colors from COLOURlovers API.",
    endpoint=EndpointConfig(path="colors/top", args_schema=TopColorsInput),
    action="retrieving top colors",
    intent="List the highest rated colors, optionally for one lover.",
    schema_notes="No required fields. Returns a JSON list of colors.",
)
