# assets/check_assets.py
"""
A utility script to check for the presence of required GUI assets.
Run it from the project root before packaging.
"""
from pathlib import Path
import sys

# Add the project root to the Python path to allow importing our modules
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

try:
    from zfinder.gui.resources import ICONS_PATH, REQUIRED_ICONS
except ImportError as e:
    print("Error: Could not import project modules. Run this script from the project root or install the project.")
    print(f"Details: {e}")
    sys.exit(1)


def check_assets() -> bool:
    """Checks the assets/icons directory for required SVG files."""
    print("--- Asset Sanity Check ---")
    print(f"Checking for icons in: {ICONS_PATH}")

    missing_icons = []
    for icon_name in REQUIRED_ICONS:
        icon_file = ICONS_PATH / f"{icon_name}.svg"
        if icon_file.exists():
            print(f"  [FOUND] {icon_name}.svg")
        else:
            print(f"  [MISSING] {icon_name}.svg")
            missing_icons.append(f"{icon_name}.svg")

    print("\n--- Summary ---")
    if not missing_icons:
        print(f"All {len(REQUIRED_ICONS)} required icons were found.")
        return True

    print(f"Found {len(REQUIRED_ICONS) - len(missing_icons)}/{len(REQUIRED_ICONS)} icons. Missing:")
    for icon in missing_icons:
        print(f"  - {icon}")
    return False


if __name__ == "__main__":
    sys.exit(0 if check_assets() else 1)
