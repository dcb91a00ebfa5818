"""
Centralized configuration for the Pixel Texture Editor.
"""

from pathlib import Path

# ==================== PATHS ====================

# Default location offered by the save dialog
OUTPUT_DIR = Path.home() / "PixelTextures"

# Default file name (without extension) for exported textures
DEFAULT_FILENAME = "TexturePalette"


# ==================== BITMAP SETTINGS ====================

# Width and height of a freshly created texture
DEFAULT_TEX_SIZE = 256

# Upper bound offered by the size fields
MAX_TEX_SIZE = 4096

# Fill color of new textures (RGBA)
DEFAULT_FILL_COLOR = (255, 255, 255, 255)


# ==================== VIEW SETTINGS ====================

# Display zoom (screen pixels per texture pixel)
DEFAULT_ZOOM = 2
MIN_ZOOM = 1
MAX_ZOOM = 10

# Gap between the canvas border and the texture
CANVAS_MARGIN = 8

# Canvas background (RGB)
CANVAS_BACKGROUND_COLOR = (45, 45, 48)

# Outline drawn around the selected pixel (RGBA)
SELECTION_HIGHLIGHT_COLOR = (255, 64, 64, 230)


# ==================== ZOOM PREVIEW ====================

# Cells per side of the magnified neighborhood
PREVIEW_CELLS = 16

# Screen pixels per preview cell
PREVIEW_SCALE = 8

# Distance from the pointer to the preview's top-left corner
PREVIEW_OFFSET = 10

# Frame and background of the preview box (RGBA)
PREVIEW_FRAME_COLOR = (77, 77, 77, 255)
PREVIEW_BACKGROUND_COLOR = (56, 56, 56, 255)


# ==================== EDITING ====================

# Ask before a click discards an unapplied color edit
CONFIRM_DISCARD_EDITS = False


# ==================== APPLICATION ====================

# Window title
APP_TITLE = "Pixel Texture Editor"

# Initial window size
WINDOW_SIZE = (1280, 800)

# Frame rate of the hover repaint timer
MAX_FPS = 60


# ==================== DEVELOPMENT ====================

# Debug mode (enables [DEBUG] console lines)
DEBUG = False

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR


# ==================== HELPERS ====================

def ensure_directories() -> bool:
    """Creates the required directories if they don't exist.

    Returns:
        False if they could not be created
    """
    try:
        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"[ERROR] Cannot create {OUTPUT_DIR}: {e}")
        return False
    return True


def debug_enabled() -> bool:
    """Whether [DEBUG] lines should be printed."""
    return DEBUG or LOG_LEVEL == "DEBUG"
