"""
Fixed NuGet feed settings.
"""
from __future__ import annotations

from pathlib import Path
from typing import Final


REPOSITORY_URL: Final[str] = "https://www.nuget.org/v1/FeedService.svc"

# Literal form with a Windows-style trailing separator.
OUTPUT_DIR: Final[str] = "output\\"

_OUTPUT_DIR_NAME: Final[str] = "output"


def get_repository_url() -> str:
    """
    Return the NuGet feed service endpoint.
    """
    return REPOSITORY_URL


def get_output_dir() -> str:
    """
    Return the output directory exactly as configured, trailing backslash included.
    """
    return OUTPUT_DIR


def get_output_path() -> Path:
    """
    Return the output directory as a relative path for the current platform.

    The filesystem is not touched: the directory is neither created nor
    resolved against the working directory.
    """
    return Path(_OUTPUT_DIR_NAME)
