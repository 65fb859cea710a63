"""Constants for the Route Planner.

Named values for the definition grammar and route rendering.
"""

# -----------------------------------------------------------------------------
# Definition Grammar
# -----------------------------------------------------------------------------

# Separates a destination from the destination it depends on: "y => z"
DEFINITION_SEPARATOR: str = "=>"

# Definition file lines starting with this prefix are ignored
COMMENT_PREFIX: str = "#"


# -----------------------------------------------------------------------------
# Rendering
# -----------------------------------------------------------------------------

# Joins destination names in the rendered route
ROUTE_SEPARATOR: str = " "

# Encoding used for definition files (utf-8-sig tolerates a leading BOM)
DEFINITION_FILE_ENCODING: str = "utf-8-sig"
