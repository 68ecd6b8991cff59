# Tool definitions package: colourlovers
