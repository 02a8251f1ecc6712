"""The git working tree that the sync operates on

This wraps the handful of version control operations that the sync needs: switching branches, removing paths, and restoring paths
from another branch. Nothing is ever committed -- the resulting changes are left in the working tree for a human (or CI) to commit.

Failed git commands raise GitPython's `git.exc.GitCommandError`.

:Module: workflow_sync.working_tree
:License: See the LICENSE file for details
"""
import os
import shutil
from typing import Iterable, List, Optional

from git import Repo

from workflow_sync.utils.logging import LOGGER


class GitWorkingTree:
    """The git working tree. All paths are relative to `repo_dir` (the current working directory if not supplied)."""

    def __init__(self, repo_dir: Optional[str] = None):
        self.repo_dir = repo_dir or os.getcwd()
        self._repo: Repo = None  # noqa

    @property
    def repo(self) -> Repo:
        """Lazy-loads the repo so that nothing needs to be a git repository until a git command is actually run."""
        if self._repo is None:
            LOGGER.debug(f"[🐙] Opening the git repository at: {self.repo_dir}")
            self._repo = Repo(self.repo_dir)

        return self._repo

    def switch_to(self, ref: str) -> None:
        """Checks out the given branch."""
        LOGGER.debug(f"[🐙] Running: git checkout {ref}")
        self.repo.git.checkout(ref)

    def remove_paths(self, paths: Iterable[str]) -> None:
        """Recursively removes the given files and directories. Paths that don't exist are ignored (like `rm -fr`)."""
        for path in paths:
            full_path = os.path.join(self.repo_dir, path)

            if os.path.isdir(full_path) and not os.path.islink(full_path):
                LOGGER.debug(f"[🗑️] Removing directory: {path}")
                shutil.rmtree(full_path)

            elif os.path.lexists(full_path):
                LOGGER.debug(f"[🗑️] Removing file: {path}")
                os.remove(full_path)

            else:
                LOGGER.debug(f"[⏭️] Nothing to remove at: {path}")

    def restore_paths(self, ref: str, paths: List[str]) -> None:
        """Restores the given paths from the given branch into the working tree (and index)."""
        LOGGER.debug(f"[🐙] Running: git checkout {ref} -- ({len(paths)} path(s))")
        self.repo.git.checkout(ref, "--", *paths)
