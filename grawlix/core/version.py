"""
Version information for the grawlix service.
Reads VERSION.json at the repository root when a build step has written one.
"""

import json
import logging
import platform
import sys
from pathlib import Path
from typing import Dict, Any

logger = logging.getLogger(__name__)

VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION.json"

DEFAULT_VERSION = {
    "version": "0.1.0",
    "git_commit": "",
    "build_number": 0,
    "environment": "development",
}


def get_version_info() -> Dict[str, Any]:
    """
    Get version information from VERSION.json.
    Falls back to DEFAULT_VERSION if the file is missing or unreadable.
    """
    info = DEFAULT_VERSION.copy()
    try:
        if VERSION_FILE.exists():
            with open(VERSION_FILE, "r") as f:
                info.update(json.load(f))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read version file: %s", e)
    return info


def get_version_string() -> str:
    info = get_version_info()
    return f"v{info['version']}-{info['build_number']}"


def get_full_version_info() -> Dict[str, Any]:
    """Version info plus the interpreter it runs on."""
    info = get_version_info()
    info.update({
        "version_string": f"v{info['version']}-{info['build_number']}",
        "python_version": platform.python_version(),
        "platform": sys.platform,
    })
    return info
