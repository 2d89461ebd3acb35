"""
VersionInfo domain object for versiongen.

Holds every resolved output as a typed, optional value. The conversion to
the flat string map that CI steps consume happens only in ``to_outputs``:
None becomes ``""`` and booleans become ``"true"``/``"false"``.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional


DOCKER_LATEST = "latest"
DOCKER_NULL = "null"  # the image publisher rejects empty tags, so "no deploy" needs a value


@dataclass(frozen=True)
class VersionInfo:
    """Resolved version outputs, in evaluation order."""

    is_push: bool = False
    is_tag: bool = False
    is_main: bool = False
    is_push_tag: bool = False
    is_push_main: bool = False
    commit: Optional[str] = None
    commit_main: Optional[str] = None
    is_main_here: bool = False
    git_describe_tags: Optional[str] = None
    tag_latest: Optional[str] = None
    distance: int = 0
    tag_distance: Optional[str] = None
    tag_head: Optional[str] = None
    dash_distance: Optional[str] = None
    tag_latest_ltrimv: Optional[str] = None
    tag_distance_ltrimv: Optional[str] = None
    tag_head_ltrimv: Optional[str] = None
    rust_crate_version: Optional[str] = None
    python_module_version: Optional[str] = None
    version_tagged: Optional[str] = None
    version_commit: Optional[str] = None
    version_docker_ci: str = DOCKER_NULL
    version_mismatch: Optional[str] = None

    @classmethod
    def output_names(cls):
        """All output keys, in evaluation order."""
        return [f.name for f in fields(cls)]

    def to_outputs(self) -> Dict[str, str]:
        """
        Render as the flat CI output map.

        Every key is always present.
        """
        return {name: _render(getattr(self, name)) for name in self.output_names()}


def _render(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
