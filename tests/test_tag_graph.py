"""Tests for TagGraphReader with a mocked GitClient."""

import logging
from unittest.mock import MagicMock

import pytest

from versiongen.exit_codes import GitError
from versiongen.infra import GitClient
from versiongen.services import TagGraphReader


@pytest.fixture
def git():
    client = MagicMock(spec=GitClient)
    client.head_commit.return_value = "abc1234"
    client.exact_tag.return_value = None
    client.describe_tags.return_value = None
    client.branch_commit.return_value = None
    return client


class TestTagGraphReader:

    def test_no_tags(self, git):
        graph = TagGraphReader(git).read("/repo")
        assert graph.describe.tag_latest is None
        assert graph.describe.distance == 0
        assert graph.describe.commit == "abc1234"
        assert graph.head_tag is None

    def test_tag_behind_head(self, git):
        git.describe_tags.return_value = "v1.0.0-3-gabc1234"
        graph = TagGraphReader(git).read("/repo")
        assert graph.describe.tag_latest == "v1.0.0"
        assert graph.describe.distance == 3
        assert graph.head_tag is None

    def test_tag_on_head(self, git):
        git.describe_tags.return_value = "v1.0.0"
        git.exact_tag.return_value = "v1.0.0"
        graph = TagGraphReader(git).read("/repo")
        assert graph.describe.tag_latest == "v1.0.0"
        assert graph.describe.distance == 0
        assert graph.head_tag == "v1.0.0"

    def test_exact_tag_that_looks_like_long_form(self, git):
        git.describe_tags.return_value = "build-7-gbeef"
        git.exact_tag.return_value = "build-7-gbeef"
        graph = TagGraphReader(git).read("/repo")
        assert graph.describe.tag_latest == "build-7-gbeef"
        assert graph.describe.distance == 0
        assert graph.describe.commit == "abc1234"

    def test_bare_describe_without_exact_tag_is_logged(self, git, caplog):
        git.describe_tags.return_value = "v1.0.0"
        with caplog.at_level(logging.DEBUG, logger="versiongen.services.tag_graph"):
            graph = TagGraphReader(git).read("/repo")
        assert graph.describe.tag_latest == "v1.0.0"
        assert graph.describe.distance == 0
        assert graph.head_tag is None
        assert "bare tag v1.0.0" in caplog.text

    def test_main_commit_prefers_main(self, git):
        git.branch_commit.side_effect = lambda path, branch: {"main": "1111111", "master": "2222222"}[branch]
        assert TagGraphReader(git).read("/repo").commit_main == "1111111"

    def test_main_commit_falls_back_to_master(self, git):
        git.branch_commit.side_effect = lambda path, branch: {"master": "2222222"}.get(branch)
        assert TagGraphReader(git).read("/repo").commit_main == "2222222"

    def test_fatal_errors_propagate(self, git):
        git.head_commit.side_effect = GitError("git rev-parse --short HEAD failed")
        with pytest.raises(GitError):
            TagGraphReader(git).read("/not-a-repo")
