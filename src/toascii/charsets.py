from enum import Enum

# Luminance palette, densest (dark pixels) to lightest (bright pixels)
DENSITY = "#$?0=*c~. "


class EdgeGlyph(str, Enum):
    HORIZONTAL = "-"
    RIGHT_DIAGONAL = "\\"
    VERTICAL = "|"
    LEFT_DIAGONAL = "/"
    # Reserved for corner detection; no bucket maps to it yet
    CORNER = "+"


# Inclusive integer degree ranges of the edge angle, covering 0-180 exactly once
EDGE_BUCKETS = [
    ((0, 19), EdgeGlyph.HORIZONTAL),  # 38 degrees together with 161-180
    ((20, 70), EdgeGlyph.RIGHT_DIAGONAL),  # 50 degrees
    ((71, 109), EdgeGlyph.VERTICAL),  # 38 degrees
    ((110, 160), EdgeGlyph.LEFT_DIAGONAL),  # 50 degrees
    ((161, 180), EdgeGlyph.HORIZONTAL),
]
