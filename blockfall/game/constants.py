"""
Fixed geometry and timing of the playing field.

The field is FIELD_WIDTH columns by FIELD_HEIGHT rows. Row 0 is the top
and y grows downward; column 0 is the left edge.
"""

FIELD_WIDTH: int = 10
FIELD_HEIGHT: int = 15

# Pixel size of one cell when rendered
PIXEL_SIZE: int = 30

# Auto-drop period of the active block group
UPDATE_INTERVAL_MS: int = 700

# Ambient visual timers (renderer only)
BLINK_INTERVAL_MS: int = 1000
BG_CHANGE_INTERVAL_MS: int = 5000

# Points per cleared row
ROW_SCORE: int = 10
