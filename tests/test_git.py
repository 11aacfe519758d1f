"""Tests for the git wrappers against a throwaway repository."""

from __future__ import annotations

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from git_browse_url import git
from git_browse_url.builder import UrlBuilder
from git_browse_url.exceptions import GitCommandError
from git_browse_url.models import BuildRequest


@unittest.skipUnless(shutil.which("git"), "git is not installed")
class GitWrapperTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.repo = Path(self._tmp.name).resolve() / "widgets"
        self.repo.mkdir()
        git.run_git(["init", "-b", "main"], cwd=self.repo)

    def _commit(self) -> None:
        git.run_git(
            ["-c", "user.name=Test", "-c", "user.email=test@example.com", "commit", "--allow-empty", "-m", "init"],
            cwd=self.repo,
        )

    def test_rev_parse_toplevel_from_subdirectory(self) -> None:
        sub = self.repo / "pkg" / "core"
        sub.mkdir(parents=True)

        self.assertEqual(git.rev_parse_toplevel(sub).resolve(), self.repo)

    def test_remote_url(self) -> None:
        git.run_git(["remote", "add", "origin", "git@example.com:acme/widgets.git"], cwd=self.repo)

        self.assertEqual(git.remote_url(self.repo, "origin"), "git@example.com:acme/widgets.git")

    def test_unknown_remote_raises(self) -> None:
        with self.assertRaises(GitCommandError) as ctx:
            git.remote_url(self.repo, "nope")

        self.assertNotEqual(ctx.exception.returncode, 0)
        self.assertEqual(ctx.exception.command, ["git", "remote", "get-url", "nope"])

    def test_default_remote_prefers_origin(self) -> None:
        git.run_git(["remote", "add", "backup", "https://example.com/backup.git"], cwd=self.repo)
        git.run_git(["remote", "add", "origin", "https://example.com/origin.git"], cwd=self.repo)

        self.assertEqual(git.default_remote(self.repo), "origin")

    def test_default_remote_falls_back_to_first(self) -> None:
        git.run_git(["remote", "add", "upstream", "https://example.com/upstream.git"], cwd=self.repo)

        self.assertEqual(git.list_remotes(self.repo), ["upstream"])
        self.assertEqual(git.default_remote(self.repo), "upstream")

    def test_default_remote_none_without_remotes(self) -> None:
        self.assertIsNone(git.default_remote(self.repo))

    def test_current_branch(self) -> None:
        self.assertEqual(git.current_branch(self.repo), "main")

    def test_current_branch_none_when_detached(self) -> None:
        self._commit()
        git.run_git(["checkout", "--detach"], cwd=self.repo)

        self.assertIsNone(git.current_branch(self.repo))

    def test_not_a_repository(self) -> None:
        outside = Path(self._tmp.name).resolve() / "plain"
        outside.mkdir()
        ceiling = {"GIT_CEILING_DIRECTORIES": str(Path(self._tmp.name).resolve())}
        with mock.patch.dict(os.environ, ceiling), self.assertRaises(GitCommandError):
            git.rev_parse_toplevel(outside)

    def test_builder_for_repository_end_to_end(self) -> None:
        git.run_git(["remote", "add", "origin", "https://github.com/acme/widgets.git"], cwd=self.repo)
        (self.repo / "src").mkdir()
        (self.repo / "src" / "index.ts").write_text("export {};\n")
        sub = self.repo / "docs"
        sub.mkdir()

        builder = UrlBuilder.for_repository(sub)
        url = builder.build(BuildRequest(remote="origin", branch="main", file="src/index.ts", line=7))

        self.assertEqual(url, "https://github.com/acme/widgets/blob/main/src/index.ts#L7")


if __name__ == "__main__":
    unittest.main()
