"""
Main entry point for the Pixel Texture Editor (PySide6 version).
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from PySide6.QtWidgets import QApplication

from pixeledit import config
from pixeledit.application import PixelEditorApp


def main():
    """Main entry point."""
    print("=" * 70)
    print(config.APP_TITLE)
    print("=" * 70)
    print()
    print("[INFO] Initializing Qt application...")

    # Create Qt application
    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_TITLE)

    # Create and setup application
    editor = PixelEditorApp()
    editor.setup()

    print("[INFO] Application ready!")
    print()
    print("Controls:")
    print("   - Create Texture: set width/height, then Create")
    print("   - Select Pixel: left click (or type X / Y)")
    print("   - Edit Color: swatch or hex field, then Apply Color")
    print("   - Zoom: slider or mouse wheel | Pan: middle mouse button")
    print("   - Save: File > Save Texture (PNG)")
    print()

    # Run application
    sys.exit(editor.run())


if __name__ == "__main__":
    main()
