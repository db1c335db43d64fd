"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Version information for the Cumulocity core client.

The version string lives in the VERSION file at the repository root.
"""

from pathlib import Path

def get_version() -> str:
    """
    Read version from VERSION file.

    Returns:
        str: The version string (e.g., "0.1.0"), or "unknown" when the
        package is used without its VERSION file.
    """
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "unknown"

__version__ = get_version()
