"""
Rendering defaults for the ink renderer.

Update these values to match your host application.
Colors are RGBA tuples with 0-255 channels.
"""

from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Ink and shape color (MyScript blue)
DEFAULT_COLOR = (21, 128, 205, 255)

# Bounding box fill: translucent black
DEFAULT_RECT_COLOR = (0, 0, 0, 51)

# Stroke width in pixels
DEFAULT_WIDTH = 4

# Rule node overlays: red outline, 10% red fill
DIAGNOSTIC_COLOR = (255, 0, 0, 255)
DIAGNOSTIC_RECT_COLOR = (255, 0, 0, 26)

# Demo canvas
DEFAULT_CANVAS_SIZE = (800, 600)
DEFAULT_BACKGROUND = (255, 255, 255, 255)

# Where the demo writes rendered images
OUTPUT_DIR = PROJECT_ROOT / "outputs"
# OUTPUT_DIR = Path("/tmp/ink_renderer")


def check_output_dir(create: bool = False) -> bool:
    """Check (and optionally create) the output directory, printing status."""
    print("Render Output Configuration:")
    print("=" * 50)

    if create:
        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    exists = OUTPUT_DIR.exists()
    status = "✓" if exists else "✗ (missing)"
    print(f"  Output: {OUTPUT_DIR}")
    print(f"    Status: {status}")
    print("=" * 50)
    return exists


if __name__ == "__main__":
    check_output_dir()
