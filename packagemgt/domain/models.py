"""
Pydantic models for the NuGet package-management settings.

The values held here are process-wide constants: the model is frozen so an
instance can be shared freely between threads and tasks.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ConfigDict

from packagemgt.data.nuget_data import OUTPUT_DIR, REPOSITORY_URL


class NugetData(BaseModel):
    """
    Fixed NuGet feed settings consumed by package-management tooling.

    ``output_dir`` keeps the literal form (trailing backslash included) for
    consumers that compare the exact string. ``output_path`` is the same
    directory as a relative path using the running platform's separator.
    """

    model_config = ConfigDict(frozen=True)

    repository_url: str = Field(
        default=REPOSITORY_URL,
        description="Endpoint of the NuGet package feed service. Not validated or parsed.",
    )
    output_dir: str = Field(
        default=OUTPUT_DIR,
        description="Relative directory where downstream output is written. Never created or resolved here.",
    )

    @property
    def output_path(self) -> Path:
        # Accept either separator in the literal; drop the trailing one.
        parts = [p for p in self.output_dir.replace("\\", "/").split("/") if p]
        return Path(*parts)
