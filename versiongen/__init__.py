"""
versiongen - Version identifiers for CI runs from git tags.

versiongen looks at the triggering CI event and ref plus the repository's
tag graph and emits a flat set of outputs (``version_tagged``,
``version_commit``, ``version_docker_ci``, ...) for later publishing steps.

Quick Start:
    import versiongen

    info = versiongen.resolve("/path/to/repo", event_name="push",
                              ref="refs/heads/main")
    print(info.version_commit)     # e.g. "1.4.0-3"
    print(info.to_outputs())       # every key, all strings
"""

__version__ = "0.1.0"

# High-level API
from .api import VersionGen, resolve

# Domain objects
from .domain import (
    RefInfo,
    RefKind,
    DescribeResult,
    VersionInfo,
    is_push_event,
    ltrimv,
)

# Services (for advanced use)
from .services import (
    TagGraph,
    TagGraphReader,
    ProjectVersions,
    Overrides,
    VersionResolver,
)

# Configuration
from .config import load_config

__all__ = [
    "__version__",
    "VersionGen",
    "resolve",
    "RefInfo",
    "RefKind",
    "DescribeResult",
    "VersionInfo",
    "is_push_event",
    "ltrimv",
    "TagGraph",
    "TagGraphReader",
    "ProjectVersions",
    "Overrides",
    "VersionResolver",
    "load_config",
]
