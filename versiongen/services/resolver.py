"""
Version resolver for versiongen.

Combines the classified ref and event with the tag graph into the full set
of outputs. Each output is computed once, in a fixed order, and later
outputs only read earlier ones:

    is_push, is_tag, is_main      classifiers
    is_push_tag, is_push_main     event x ref
    commit ... tag_head_ltrimv    tag graph facts
    version_tagged                tag push only
    version_commit                tag push, else main push
    version_docker_ci             "latest" / tag / "null"
    version_mismatch              tag vs. project files

The resolver is pure: no git, no environment, no files.
"""

from dataclasses import dataclass
from typing import Optional

from ..domain import (
    DOCKER_LATEST,
    DOCKER_NULL,
    DescribeResult,
    RefInfo,
    VersionInfo,
    ltrimv,
)
from .project_files import ProjectVersions
from .tag_graph import TagGraph


OVERRIDE_ENV = {
    'version_tagged': 'OVERRIDE_VERSION_TAGGED',
    'version_commit': 'OVERRIDE_VERSION_COMMIT',
    'version_docker_ci': 'OVERRIDE_VERSION_DOCKER_CI',
}


@dataclass(frozen=True)
class Overrides:
    """
    Replacement values for the primary outputs.

    An override replaces a value whenever its rule applies (a tag push for
    version_tagged, a tag or main push for version_commit and
    version_docker_ci), even if the derived value is undefined. It never
    turns a run that would not deploy into one that does.
    """
    version_tagged: Optional[str] = None
    version_commit: Optional[str] = None
    version_docker_ci: Optional[str] = None

    @classmethod
    def from_env(cls, environ) -> 'Overrides':
        """Read ``OVERRIDE_VERSION_*`` variables; empty values are ignored."""
        return cls(**{
            field: environ.get(var) or None
            for field, var in OVERRIDE_ENV.items()
        })


def _suffix_distance(value: Optional[str], distance: int) -> Optional[str]:
    if value is None:
        return None
    return f"{value}-{distance}"


def _mismatch(tag_version: Optional[str], project: ProjectVersions) -> Optional[str]:
    if tag_version is None:
        return None
    for filename, declared in project.candidates():
        if declared != tag_version:
            return (
                f"file={filename}::Version mismatch: "
                f"tag {tag_version} != {declared} from {filename}"
            )
    return None


class VersionResolver:
    """
    Evaluates the output precedence table.

    Example:
        resolver = VersionResolver()
        info = resolver.resolve(
            RefInfo.parse("refs/heads/main"), True, graph
        )
        info.version_commit   # "1.4.0-3"
    """

    def resolve(
        self,
        ref: RefInfo,
        is_push: bool,
        graph: TagGraph,
        project: Optional[ProjectVersions] = None,
        overrides: Optional[Overrides] = None
    ) -> VersionInfo:
        """
        Resolve every output.

        Args:
            ref: Classified triggering ref
            is_push: Whether the triggering event is a push
            graph: Tag facts for HEAD
            project: Versions declared in project files
            overrides: OVERRIDE_VERSION_* replacement values

        Returns:
            VersionInfo
        """
        project = project or ProjectVersions()
        overrides = overrides or Overrides()
        describe: DescribeResult = graph.describe

        is_tag = ref.is_tag
        is_main = ref.is_main
        is_push_tag = is_push and is_tag
        is_push_main = is_push and is_main

        commit = describe.commit
        distance = describe.distance
        tag_latest = describe.tag_latest
        tag_head = graph.head_tag

        tag_latest_ltrimv = ltrimv(tag_latest)
        tag_head_ltrimv = ltrimv(tag_head)

        version_tagged = tag_head_ltrimv if is_push_tag else None

        if is_push_tag:
            version_commit = tag_head_ltrimv
        elif is_push_main:
            version_commit = _suffix_distance(tag_latest_ltrimv, distance)
        else:
            version_commit = None

        if is_push_main:
            version_docker_ci = DOCKER_LATEST
        elif is_push_tag and tag_head_ltrimv:
            version_docker_ci = tag_head_ltrimv
        else:
            version_docker_ci = DOCKER_NULL

        version_mismatch = _mismatch(version_tagged, project)

        deploys = is_push_tag or is_push_main
        if is_push_tag and overrides.version_tagged:
            version_tagged = overrides.version_tagged
        if deploys and overrides.version_commit:
            version_commit = overrides.version_commit
        if deploys and overrides.version_docker_ci:
            version_docker_ci = overrides.version_docker_ci

        return VersionInfo(
            is_push=is_push,
            is_tag=is_tag,
            is_main=is_main,
            is_push_tag=is_push_tag,
            is_push_main=is_push_main,
            commit=commit,
            commit_main=graph.commit_main,
            is_main_here=graph.commit_main is not None and graph.commit_main == commit,
            git_describe_tags=describe.raw,
            tag_latest=tag_latest,
            distance=distance,
            tag_distance=_suffix_distance(tag_latest, distance),
            tag_head=tag_head,
            dash_distance=f"-{distance}",
            tag_latest_ltrimv=tag_latest_ltrimv,
            tag_distance_ltrimv=_suffix_distance(tag_latest_ltrimv, distance),
            tag_head_ltrimv=tag_head_ltrimv,
            rust_crate_version=project.rust_crate_version,
            python_module_version=project.python_module_version,
            version_tagged=version_tagged,
            version_commit=version_commit,
            version_docker_ci=version_docker_ci,
            version_mismatch=version_mismatch,
        )
