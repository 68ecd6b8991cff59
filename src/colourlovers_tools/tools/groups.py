from typing import Dict, List

# Central registry of tool groups.
# Map group names to the internal names of the tools they contain.
TOOL_GROUPS: Dict[str, List[str]] = {
    "colors": [
        "get_color_info",
        "get_colors",
        "get_top_colors",
    ],
    "palettes": [
        "get_palette",
        "fetch_palettes",
        "get_top_palettes",
        "fetch_random_palette",
    ],
    "colourlovers": [
        "get_color_info",
        "get_colors",
        "get_top_colors",
        "get_palette",
        "fetch_palettes",
        "get_top_palettes",
        "fetch_random_palette",
    ],
}
