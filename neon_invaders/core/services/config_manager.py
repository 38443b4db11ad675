"""
config_manager.py
-----------------
JSON configuration loader for gameplay tuning.

Features:
- Builds a file index of the package config directory once
- Paths that already exist on disk bypass the index
- Recursively merges file contents over caller-supplied defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

from neon_invaders.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    DATA_ROOT,
    ".",
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Filename from the config index, or a path on disk
        default_dict: Default fallback config
        strict: If True, raise on a missing or unreadable file

    Returns:
        dict: Defaults with the file contents merged on top
    """
    if default_dict is None:
        default_dict = {}

    path = filename if os.path.isfile(filename) else _resolve_search_path(filename)

    try:
        data = _load_json(path)
    except (json.JSONDecodeError, OSError) as e:
        if strict:
            DebugLogger.fail(f"Failed to load {path}: {e}", category="loading")
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    if not isinstance(data, dict):
        if strict:
            DebugLogger.fail(f"Config root must be an object: {path}", category="loading")
            raise ValueError(f"Config root must be an object: {filename}")
        DebugLogger.warn(f"Ignoring {path}: root is not an object", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Scan config directories and cache all JSON file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for file in sorted(os.listdir(directory)):
            if file.endswith(".json") and file not in _FILE_INDEX:
                _FILE_INDEX[file] = os.path.join(directory, file)

    DebugLogger.system(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def rebuild_file_index():
    """Clear and rebuild the index."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Look up a bare filename in the index, with or without extension."""
    if _FILE_INDEX is None:
        build_file_index()

    name = filename.replace("\\", "/").split("/")[-1]

    if name in _FILE_INDEX:
        return _FILE_INDEX[name]
    if name + ".json" in _FILE_INDEX:
        return _FILE_INDEX[name + ".json"]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts into a new one. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        elif isinstance(value, dict):
            merged[key] = _merge_dicts({}, value)
        else:
            merged[key] = value
    return merged
