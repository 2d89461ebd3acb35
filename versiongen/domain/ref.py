"""
Ref and event classification for versiongen.

The CI environment hands us two loosely-typed strings: the event name
(``push``, ``pull_request``, ...) and the ref that triggered the run
(``refs/tags/v1.2.0``, ``refs/heads/main``, ``refs/pull/7/merge``).
These helpers turn them into typed values. Nothing here can fail: an
empty or unexpected ref is simply ``RefKind.OTHER``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


TAG_PREFIX = "refs/tags/"
BRANCH_PREFIX = "refs/heads/"
MAIN_BRANCHES = ("main", "master")
PUSH_EVENT = "push"


class RefKind(Enum):
    """What the triggering ref points at."""
    TAG = "tag"
    BRANCH = "branch"
    OTHER = "other"


@dataclass(frozen=True)
class RefInfo:
    """
    A classified ref.

    Attributes:
        kind: Tag, branch or anything else
        name: Bare tag/branch name with the namespace prefix stripped,
              None for OTHER
    """

    kind: RefKind = RefKind.OTHER
    name: Optional[str] = None

    @classmethod
    def parse(cls, ref: Optional[str]) -> 'RefInfo':
        """
        Classify a raw ref string.

        Examples:
            RefInfo.parse("refs/tags/v1.2.0")  -> RefInfo(TAG, "v1.2.0")
            RefInfo.parse("refs/heads/main")   -> RefInfo(BRANCH, "main")
            RefInfo.parse("refs/pull/7/merge") -> RefInfo(OTHER, None)
        """
        if not ref:
            return cls()
        if ref.startswith(TAG_PREFIX):
            return cls(RefKind.TAG, ref[len(TAG_PREFIX):])
        if ref.startswith(BRANCH_PREFIX):
            return cls(RefKind.BRANCH, ref[len(BRANCH_PREFIX):])
        return cls()

    @property
    def is_tag(self) -> bool:
        return self.kind is RefKind.TAG

    @property
    def is_branch(self) -> bool:
        return self.kind is RefKind.BRANCH

    @property
    def is_main(self) -> bool:
        """True only for the branches ``main`` and ``master``, matched exactly."""
        return self.is_branch and self.name in MAIN_BRANCHES


def is_push_event(event_name: Optional[str]) -> bool:
    """Only a ``push`` event carries deploy semantics."""
    return event_name == PUSH_EVENT
