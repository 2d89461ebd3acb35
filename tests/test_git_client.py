"""Tests for the git client with subprocess mocked out."""

import subprocess
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from versiongen.exit_codes import CONFIG_ERROR, GitError
from versiongen.infra import GitClient


def completed(stdout="", returncode=0, stderr=""):
    result = MagicMock()
    result.stdout = stdout
    result.stderr = stderr
    result.returncode = returncode
    return result


class TestGitClient(unittest.TestCase):

    def setUp(self):
        self.client = GitClient(timeout=5)

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_head_commit(self, mock_run):
        mock_run.return_value = completed("abc1234\n")
        self.assertEqual(self.client.head_commit("/repo"), "abc1234")
        args, kwargs = mock_run.call_args
        self.assertEqual(args[0], ['git', 'rev-parse', '--short', 'HEAD'])
        self.assertEqual(kwargs['cwd'], "/repo")
        self.assertEqual(kwargs['timeout'], 5)

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_head_commit_not_a_repo(self, mock_run):
        mock_run.return_value = completed(
            returncode=128,
            stderr="fatal: not a git repository (or any of the parent directories): .git\n"
        )
        with self.assertRaises(GitError) as ctx:
            self.client.head_commit("/tmp")
        self.assertIn("not a git repository", str(ctx.exception))
        self.assertEqual(ctx.exception.exit_code, CONFIG_ERROR)

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_git_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")
        with self.assertRaises(GitError) as ctx:
            self.client.describe_tags(tempfile.gettempdir())
        self.assertIn("git executable not found", str(ctx.exception))

    def test_missing_repository_path(self):
        with self.assertRaises(GitError) as ctx:
            self.client.head_commit("/definitely/not/here")
        self.assertIn("Repository path not found", str(ctx.exception))

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=5)
        with self.assertRaises(GitError) as ctx:
            self.client.exact_tag("/repo")
        self.assertIn("timed out", str(ctx.exception))

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_describe_tags(self, mock_run):
        mock_run.return_value = completed("v1.0.0-2-gabc1234\n")
        self.assertEqual(self.client.describe_tags("/repo"), "v1.0.0-2-gabc1234")
        self.assertEqual(mock_run.call_args[0][0], ['git', 'describe', '--tags'])

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_describe_tags_no_names(self, mock_run):
        mock_run.return_value = completed(
            returncode=128, stderr="fatal: No names found, cannot describe anything.\n"
        )
        self.assertIsNone(self.client.describe_tags("/repo"))

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_exact_tag(self, mock_run):
        mock_run.return_value = completed("v2.0.0\n")
        self.assertEqual(self.client.exact_tag("/repo"), "v2.0.0")
        self.assertEqual(
            mock_run.call_args[0][0],
            ['git', 'describe', '--tags', '--exact-match', 'HEAD']
        )

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_exact_tag_none(self, mock_run):
        mock_run.return_value = completed(returncode=128, stderr="fatal: no tag exactly matches\n")
        self.assertIsNone(self.client.exact_tag("/repo"))

    @patch('versiongen.infra.git_client.subprocess.run')
    def test_branch_commit_missing(self, mock_run):
        mock_run.return_value = completed(returncode=1)
        self.assertIsNone(self.client.branch_commit("/repo", "main"))
        self.assertEqual(
            mock_run.call_args[0][0],
            ['git', 'rev-parse', '--short', '--verify', '--quiet', 'refs/heads/main']
        )


if __name__ == '__main__':
    unittest.main()
