"""
Fixed NuGet feed settings for package-management tooling.
"""

from packagemgt.core.dependencies import get_nuget_data
from packagemgt.data.nuget_data import (
    OUTPUT_DIR,
    REPOSITORY_URL,
    get_output_dir,
    get_output_path,
    get_repository_url,
)
from packagemgt.domain.models import NugetData

__version__ = "0.1.0"

__all__ = [
    "NugetData",
    "OUTPUT_DIR",
    "REPOSITORY_URL",
    "get_nuget_data",
    "get_output_dir",
    "get_output_path",
    "get_repository_url",
]
