"""
Tag graph reader for versiongen.

Collects the facts about HEAD that the resolver needs: the nearest
reachable tag and distance, the tag exactly at HEAD, and where the main
branch points. The nearest tag and the HEAD tag are two separate git
queries and are never derived from each other.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from ..domain import DescribeResult
from ..domain.ref import MAIN_BRANCHES
from ..infra import GitClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagGraph:
    """Tag facts for one repository state."""
    describe: DescribeResult
    head_tag: Optional[str] = None
    commit_main: Optional[str] = None


class TagGraphReader:
    """
    Reads tag and commit facts from a git work tree.

    Example:
        reader = TagGraphReader()
        graph = reader.read("/path/to/repo")
        print(graph.describe.tag_latest, graph.describe.distance)
    """

    def __init__(self, git_client: Optional[GitClient] = None):
        """
        Initialize TagGraphReader.

        Args:
            git_client: Git client instance (creates default if None)
        """
        self.git = git_client or GitClient()

    def read(self, path: str) -> TagGraph:
        """
        Query the repository at ``path``.

        A history without tags is not an error: tag_latest is None and
        distance is 0.

        Raises:
            GitError: git is missing or ``path`` is not a repository
        """
        commit = self.git.head_commit(path)
        head_tag = self.git.exact_tag(path)
        return TagGraph(
            describe=self.describe(path, commit, head_tag),
            head_tag=head_tag,
            commit_main=self.main_commit(path),
        )

    def describe(self, path: str, commit: str, head_tag: Optional[str] = None) -> DescribeResult:
        """Nearest reachable tag for HEAD."""
        raw = self.git.describe_tags(path)
        if raw is None:
            logger.debug(f"No tags reachable from HEAD in {path}")
            return DescribeResult.untagged(commit)
        result = DescribeResult.parse(raw, commit, exact=(raw == head_tag))
        if result.distance == 0 and head_tag is None:
            logger.debug(f"describe reported bare tag {raw} but no tag points at HEAD in {path}")
        return result

    def main_commit(self, path: str) -> Optional[str]:
        """Abbreviated hash of the local ``main`` branch, else ``master``."""
        for branch in MAIN_BRANCHES:
            commit = self.git.branch_commit(path, branch)
            if commit:
                return commit
        return None
