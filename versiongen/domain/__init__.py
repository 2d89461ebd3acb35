"""
Domain layer for versiongen.

Contains pure domain objects with no I/O or side effects:
- RefInfo / RefKind: Classified triggering ref
- DescribeResult: Parsed ``git describe --tags`` output
- VersionInfo: Every resolved output, rendered to strings at the boundary
"""

from .ref import RefInfo, RefKind, is_push_event
from .describe import DescribeResult, ltrimv
from .version_info import VersionInfo, DOCKER_LATEST, DOCKER_NULL

__all__ = [
    'RefInfo',
    'RefKind',
    'is_push_event',
    'DescribeResult',
    'ltrimv',
    'VersionInfo',
    'DOCKER_LATEST',
    'DOCKER_NULL',
]
