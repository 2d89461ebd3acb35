"""
High-level Python API for versiongen.

Example:
    import versiongen

    # Everything from the environment (GITHUB_EVENT_NAME, GITHUB_REF, ...)
    info = versiongen.resolve("/path/to/repo")
    print(info.version_commit)

    # Explicit inputs
    vg = versiongen.VersionGen("/path/to/repo")
    info = vg.resolve(event_name="push", ref="refs/tags/v1.2.0")
    print(info.to_outputs())
"""

from typing import Any, Dict, Mapping, Optional
import logging
import os

from .config import CIEnvironment, get_git_timeout, load_config
from .domain import RefInfo, VersionInfo, is_push_event
from .infra import GitClient
from .services import (
    Overrides,
    ProjectVersions,
    TagGraphReader,
    VersionResolver,
    read_project_versions,
)

logger = logging.getLogger(__name__)


class VersionGen:
    """
    Resolves version outputs for one repository.

    Wires the git client, tag graph reader, project file readers and
    resolver together. Every collaborator can be replaced for testing.
    """

    def __init__(
        self,
        repo_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        config: Optional[Dict[str, Any]] = None,
        git_client: Optional[GitClient] = None,
    ):
        """
        Initialize VersionGen.

        Args:
            repo_path: Repository path (GITHUB_WORKSPACE or cwd if None)
            environ: Environment mapping (os.environ if None)
            config: Configuration dict (loaded from file/env if None)
            git_client: Git client instance (creates default if None)
        """
        self.environ = os.environ if environ is None else environ
        self.ci = CIEnvironment.from_env(self.environ)
        self.repo_path = repo_path or self.ci.workspace or os.getcwd()
        self.config = config if config is not None else load_config(self.repo_path, self.environ)
        self.git = git_client or GitClient(timeout=get_git_timeout(self.config))
        self.reader = TagGraphReader(self.git)
        self.resolver = VersionResolver()

    def project_versions(self) -> ProjectVersions:
        if not self.config.get('project_files', {}).get('enabled', True):
            return ProjectVersions()
        return read_project_versions(self.repo_path)

    def resolve(
        self,
        event_name: Optional[str] = None,
        ref: Optional[str] = None,
    ) -> VersionInfo:
        """
        Resolve all outputs.

        Args:
            event_name: Triggering event (GITHUB_EVENT_NAME if None)
            ref: Triggering ref (GITHUB_REF if None)

        Raises:
            GitError: git missing or repo_path not a repository
            ProjectFileError: a project file exists but is malformed
        """
        event_name = event_name if event_name is not None else self.ci.event_name
        ref = ref if ref is not None else self.ci.ref
        logger.debug(f"event={event_name!r} ref={ref!r} repo={self.repo_path}")

        graph = self.reader.read(self.repo_path)
        return self.resolver.resolve(
            RefInfo.parse(ref),
            is_push_event(event_name),
            graph,
            project=self.project_versions(),
            overrides=Overrides.from_env(self.environ),
        )


def resolve(
    repo_path: Optional[str] = None,
    event_name: Optional[str] = None,
    ref: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VersionInfo:
    """Convenience one-call wrapper around VersionGen."""
    return VersionGen(repo_path, environ=environ).resolve(event_name, ref)
