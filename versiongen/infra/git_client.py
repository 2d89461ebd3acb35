"""
Git client infrastructure for versiongen.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from ..exit_codes import GitError

logger = logging.getLogger(__name__)


class GitClient:
    """
    Abstraction over git commands.

    Queries that are allowed to fail (``describe`` in a tagless history,
    a missing branch) return None. Anything that means git itself is
    unusable raises GitError.

    Example:
        client = GitClient()
        print(client.head_commit("/path/to/repo"))
    """

    def __init__(self, timeout: float = 30, git: str = "git"):
        """
        Initialize GitClient.

        Args:
            timeout: Command timeout in seconds (default: 30)
            git: Name or path of the git executable
        """
        self.timeout = timeout
        self.git = git

    def _run(
        self,
        args: List[str],
        cwd: str,
        check: bool = False
    ) -> Tuple[Optional[str], int]:
        """
        Run a git command.

        Args:
            args: Git arguments (e.g., ['describe', '--tags'])
            cwd: Working directory
            check: Raise GitError on non-zero exit

        Returns:
            Tuple of (stripped stdout or None, returncode)
        """
        cmd = [self.git] + args
        logger.debug(f"Running: {' '.join(cmd)} in {cwd}")
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            if not Path(cwd).is_dir():
                raise GitError(f"Repository path not found: {cwd}") from e
            raise GitError(f"git executable not found ({self.git})") from e
        except subprocess.TimeoutExpired as e:
            raise GitError(f"git {' '.join(args)} timed out after {self.timeout}s") from e

        if check and result.returncode != 0:
            raise GitError(f"git {' '.join(args)} failed", stderr=result.stderr)

        if result.returncode != 0:
            logger.debug(f"git {' '.join(args)} exited {result.returncode}: {result.stderr.strip()}")

        output = result.stdout.strip()
        return output or None, result.returncode

    def head_commit(self, path: str) -> str:
        """
        Abbreviated hash of HEAD.

        Raises:
            GitError: path is not a git work tree or has no commits
        """
        output, _ = self._run(['rev-parse', '--short', 'HEAD'], cwd=path, check=True)
        if not output:
            raise GitError(f"Could not resolve HEAD in {path}")
        return output

    def describe_tags(self, path: str) -> Optional[str]:
        """
        ``git describe --tags`` for HEAD.

        Returns:
            Describe string, or None when no tag is reachable
        """
        output, code = self._run(['describe', '--tags'], cwd=path)
        return output if code == 0 else None

    def exact_tag(self, path: str) -> Optional[str]:
        """Tag pointing exactly at HEAD, or None."""
        output, code = self._run(['describe', '--tags', '--exact-match', 'HEAD'], cwd=path)
        return output if code == 0 else None

    def branch_commit(self, path: str, branch: str) -> Optional[str]:
        """Abbreviated hash of a local branch, or None if it doesn't exist."""
        output, code = self._run(
            ['rev-parse', '--short', '--verify', '--quiet', f'refs/heads/{branch}'],
            cwd=path
        )
        return output if code == 0 else None
