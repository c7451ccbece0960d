"""Git-tracked journal storage for the CLI host."""

from pathlib import Path

import logfire
from git import Repo
from git.exc import InvalidGitRepositoryError

from .config import JOURNAL_FILENAME
from .exceptions import JournalNotInitializedError


class JournalRepo:
    """A data directory holding the journal file under its own git history.

    The text engine never touches this; only the CLI reads and writes
    through it.
    """

    def __init__(self, data_dir: Path, filename: str = JOURNAL_FILENAME):
        """Initialize the class."""
        self.data_dir = data_dir
        self.git_dir = data_dir / ".git"
        self.journal_path = data_dir / filename

    def is_initialized(self) -> bool:
        return self.git_dir.exists()

    def init(self, initial_content: str = "") -> Repo:
        """Create the data directory, its git repository and the journal file."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

        if self.git_dir.exists():
            repo = Repo(self.data_dir, search_parent_directories=False)
        else:
            repo = Repo.init(self.data_dir)

        if not self.journal_path.exists():
            self.journal_path.write_text(initial_content, encoding="utf-8")
            repo.index.add([self.journal_path.name])
            repo.index.commit("Create journal")
        return repo

    def _get_repo(self) -> Repo:
        """Get the existing repository."""
        try:
            return Repo(self.data_dir, search_parent_directories=False)
        except InvalidGitRepositoryError as err:
            raise JournalNotInitializedError(str(self.data_dir)) from err

    def read(self) -> str:
        """Read the journal text (empty if the file is missing)."""
        if not self.is_initialized():
            raise JournalNotInitializedError(str(self.data_dir))
        if not self.journal_path.exists():
            return ""
        return self.journal_path.read_text(encoding="utf-8")

    def write(self, content: str) -> None:
        self.journal_path.parent.mkdir(parents=True, exist_ok=True)
        self.journal_path.write_text(content, encoding="utf-8")

    def commit(self, message: str) -> str:
        """Stage the journal and commit it.

        Returns:
            The commit SHA
        """
        repo = self._get_repo()
        repo.index.add([self.journal_path.name])
        commit = repo.index.commit(message)
        return commit.hexsha

    def save(self, content: str, message: str) -> str | None:
        """Write and commit the journal if it changed.

        Returns:
            The commit SHA, or None when the content was already current
        """
        if content == self.read():
            return None
        self.write(content)
        sha = self.commit(message)
        logfire.info("Committed journal", commit=sha[:8], message=message)
        return sha
