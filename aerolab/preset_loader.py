# aerolab/preset_loader.py

"""
Airfoil preset loading and management.
Handles loading JSON files from the presets folder and provides access to
the cached data.
"""

import os
import json
import sys

from .debug import dprint
from .engine import simulate


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def resource_path(filename):
    """
    Get the absolute path to a resource, works for dev and PyInstaller.
    filename is relative to the directory holding the aerolab package.
    """
    if hasattr(sys, '_MEIPASS'):
        return os.path.join(sys._MEIPASS, filename)
    return os.path.join(PACKAGE_ROOT, filename)


def default_preset_folder():
    """AEROLAB_PRESET_DIR if set, else the presets folder next to this module."""
    override = os.environ.get("AEROLAB_PRESET_DIR")
    if override:
        return override
    return resource_path(os.path.join("aerolab", "presets"))


def load_presets_from_folder(folder_path=None):
    """
    Load all preset JSON files from a folder.

    Args:
        folder_path: Folder containing preset JSON files (default: package presets)

    Returns:
        Dict mapping preset names to their data
    """
    if folder_path is None:
        folder_path = default_preset_folder()

    presets = {}

    if not os.path.exists(folder_path):
        print(f"[WARNING] Preset folder not found: {folder_path}")
        return presets

    for filename in sorted(os.listdir(folder_path)):
        if filename.endswith(".json"):
            filepath = os.path.join(folder_path, filename)
            try:
                with open(filepath, "r") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                dprint(f"[ERROR] Failed to load {filename}: {e}")
                continue

            if not isinstance(data, dict) or "geometry" not in data or "flow" not in data:
                dprint(f"[ERROR] {filename} is missing 'geometry' or 'flow'")
                continue

            name = data.get("name") or os.path.splitext(filename)[0].replace("_", " ")
            presets[name] = data

    return presets


class PresetData:
    """
    Wrapper around the boot-time PRESET_DATA dict.
    Provides dict-like access without disk I/O on access.
    """
    def __init__(self, data_dict):
        self._data = data_dict

    def __getitem__(self, key):
        return self._data[key]

    def get(self, key, default=None):
        return self._data.get(key, default)

    def __contains__(self, key):
        return key in self._data

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def items(self):
        return self._data.items()

    def __len__(self):
        return len(self._data)


def preset_options(presets):
    """
    Convert presets to dropdown options format.
    Format: "Name (type, t=12%, 5.0°)"
    """
    options = []
    for name, preset in presets.items():
        geom = preset["geometry"]
        label = (f"{name} ({geom.get('type', 'symmetric')}, "
                 f"t={geom.get('thickness', 0) * 100:.0f}%, "
                 f"{geom.get('angle_of_attack', 0):.1f}°)")
        options.append({"label": label, "value": name})
    return options


def get_preset(presets, name):
    """Find a preset by name, or None."""
    return presets.get(name)


def simulate_preset(presets, name):
    """
    Run the engine on a named preset.

    Returns:
        AerodynamicResults dict, or None if the preset does not exist
    """
    preset = get_preset(presets, name)
    if preset is None:
        dprint(f"[PRESET] Unknown preset: {name}")
        return None
    return simulate(preset["geometry"], preset["flow"], preset.get("mode", "full"))


# =============================================================================
# BOOT-TIME LOADING
# =============================================================================
dprint("[BOOT] Loading presets from folder once...")
PRESET_DATA = load_presets_from_folder()
PRESET_OPTIONS = preset_options(PRESET_DATA)
dprint(f"[BOOT] Loaded {len(PRESET_DATA)} presets")

preset_data = PresetData(PRESET_DATA)
