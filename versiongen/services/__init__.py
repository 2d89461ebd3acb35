"""
Service layer for versiongen.

Contains the logic that orchestrates domain objects and infrastructure:
- TagGraphReader: Tag and commit facts from git
- read_project_versions: Versions declared in Cargo.toml / setup.cfg / pyproject.toml
- VersionResolver: The output precedence table

Services are the primary API for the CLI to use.
"""

from .tag_graph import TagGraph, TagGraphReader
from .project_files import ProjectVersions, read_project_versions
from .resolver import Overrides, VersionResolver

__all__ = [
    'TagGraph',
    'TagGraphReader',
    'ProjectVersions',
    'read_project_versions',
    'Overrides',
    'VersionResolver',
]
