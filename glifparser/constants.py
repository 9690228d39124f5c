from fontTools.misc.transform import Identity

# ------------------------------------------------------------------------------
# GLIF format
# ------------------------------------------------------------------------------

GLIF_FORMAT_VERSIONS = {"1": 1, "2": 2}
"""Maps the ``format`` attribute values we understand to GlifVersion values."""

DEFAULT_FORMAT_MINOR = 0

# ------------------------------------------------------------------------------
# Image transformation
# ------------------------------------------------------------------------------

DEFAULT_TRANSFORMATION = tuple(Identity)

TRANSFORMATION_ATTRIBUTES = (
    "xScale",
    "xyScale",
    "yxScale",
    "yScale",
    "xOffset",
    "yOffset",
)

# ------------------------------------------------------------------------------
# Reader
# ------------------------------------------------------------------------------

XML_READ_CHUNK_SIZE = 64 * 1024
"""Number of bytes handed to expat per feed."""
