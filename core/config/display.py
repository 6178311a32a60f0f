"""Display and play-area configuration constants."""

# Window dimensions in pixels
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

# The frame rate for the game loop, in frames per second
FRAME_RATE = 60

# Top and bottom HUD bands each take this fraction of the screen height.
# Entities live in the band between them.
HUD_BAND_FRACTION = 1.0 / 8.0

# World size units -> on-screen radius in pixels
DISPLAY_SCALE = 30.0

# How far outside the horizontal edges enemies enter and leave
EXIT_MARGIN = 50.0

# Colours (RGB)
BACKGROUND_COLOR = (0, 100, 200)
HUD_COLOR = (0, 70, 150)
TEXT_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (255, 220, 0)
PLAYER_COLOR = (255, 165, 0)


def play_band(height: float) -> tuple:
    """Return the (top, bottom) y coordinates of the playable band."""
    return height * HUD_BAND_FRACTION, height * (1.0 - HUD_BAND_FRACTION)
