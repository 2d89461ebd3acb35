"""
Parsing of ``git describe --tags`` output.

``git describe`` prints ``<tag>-<n>-g<hash>`` when HEAD is ``n`` commits
past the nearest tag, and just ``<tag>`` when HEAD is exactly tagged.
"""

import re
from dataclasses import dataclass
from typing import Optional


DESCRIBE_RE = re.compile(
    r"^(?P<tag_latest>.*)-(?P<distance>\d+)-g(?P<commit>[0-9a-f]+)$"
)
LTRIMV_RE = re.compile(r"^v(?=\d)")


@dataclass(frozen=True)
class DescribeResult:
    """
    Facts about the nearest reachable tag.

    Attributes:
        commit: Abbreviated hash of HEAD
        tag_latest: Nearest reachable tag, None when the history has no tags
        distance: Commits between tag_latest and HEAD (0 when no tags)
        raw: The describe string as git printed it, None when describe failed
    """

    commit: str
    tag_latest: Optional[str] = None
    distance: int = 0
    raw: Optional[str] = None

    @classmethod
    def parse(cls, raw: str, head_commit: str, exact: bool = False) -> 'DescribeResult':
        """
        Parse a describe string.

        Args:
            raw: Output of ``git describe --tags``
            head_commit: Abbreviated HEAD hash, used when ``raw`` is a bare tag
            exact: Treat ``raw`` as a bare tag even if it looks like the long
                   form (a tag literally named ``x-1-gabc``)

        Returns:
            DescribeResult
        """
        raw = raw.strip()
        match = None if exact else DESCRIBE_RE.match(raw)
        if match:
            return cls(
                commit=match.group('commit'),
                tag_latest=match.group('tag_latest'),
                distance=int(match.group('distance')),
                raw=raw,
            )
        return cls(commit=head_commit, tag_latest=raw, distance=0, raw=raw)

    @classmethod
    def untagged(cls, head_commit: str) -> 'DescribeResult':
        """Result for a history with no reachable tags."""
        return cls(commit=head_commit)


def ltrimv(value: Optional[str]) -> Optional[str]:
    """
    Strip one leading ``v`` when it is immediately followed by a digit.

    >>> ltrimv("v1.2.0")
    '1.2.0'
    >>> ltrimv("version-2")
    'version-2'
    """
    if value is None:
        return None
    return LTRIMV_RE.sub("", value, count=1)
