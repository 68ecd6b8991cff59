import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from colourlovers_tools.tools.tool_models import EndpointConfig, ToolSpec

# ================================================================
# TOOL CONFIGURATION GUIDE
# ================================================================
# intent:        Formal definition of what the tool does (for the LLM).
#
# schema_notes:  Instructional notes for the LLM on input/output logic.
#
# Group membership lives in tools/groups.py.
# ================================================================

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")


class ColorInfoInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hex: str = Field(description="The 6-character hex value of the color.")
    comments: bool = Field(
        default=True,
        description="Whether to include the last 10 comments for the color.",
    )
    format: Literal["json", "xml"] = Field(
        default="json", description="The format of the response."
    )

    @field_validator("hex")
    @classmethod
    def strip_hash(cls, value: str) -> str:
        value = value.strip().lstrip("#")
        if not _HEX_RE.fullmatch(value):
            raise ValueError("must be 6 hexadecimal digits, e.g. '5a5b9f'")
        return value


tool = ToolSpec(
    name="get_color_info",
    description="Fetch color information from COLOURlovers API.",
    endpoint=EndpointConfig(path="color/{hex}", args_schema=ColorInfoInput),
    action="fetching color information",
    intent="Look up a single named color (title, RGB/HSV values, stats) by hex code.",
    schema_notes="Requires 'hex' (with or without a leading '#'). Returns the raw API payload.",
)
