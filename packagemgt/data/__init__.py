"""
Static settings for NuGet package management.

This package is responsible for:
* Holding the NuGet feed endpoint and the output directory as constants.
* Exposing read-only accessors for both values.
"""
