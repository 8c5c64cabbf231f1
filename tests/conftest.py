"""Pytest fixtures for git-reporter tests"""
import logging
import tempfile
from pathlib import Path

import git
import pytest

from git_reporter.services.git_service import GitService


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_files(git_repo):
    """Create a repository with several tracked files, some in subdirectories."""
    repo_path = Path(git_repo.working_dir)

    (repo_path / "src").mkdir()
    (repo_path / "src" / "app.py").write_text("print('app')\n")
    (repo_path / "settings.ini").write_text("[core]\n")
    (repo_path / "notes.txt").write_text("notes\n")
    git_repo.index.add(["src/app.py", "settings.ini", "notes.txt"])
    git_repo.index.commit("Add files")

    yield git_repo


@pytest.fixture
def unborn_repo(temp_dir):
    """Create a repository whose HEAD names a branch with no commits yet."""
    repo_path = temp_dir / "unborn_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    repo.git.symbolic_ref("HEAD", "refs/heads/trunk")

    yield repo

    repo.close()


@pytest.fixture
def service(git_repo):
    """GitService opened on the basic repository."""
    git_service = GitService(git_repo.working_dir)
    yield git_service
    git_service.close()


@pytest.fixture
def files_service(git_repo_with_files):
    """GitService opened on the repository with several tracked files."""
    git_service = GitService(git_repo_with_files.working_dir)
    yield git_service
    git_service.close()


@pytest.fixture
def index_bytes():
    """Return a reader for the raw on-disk index of a repository."""
    def read(repo: git.Repo) -> bytes:
        return (Path(repo.git_dir) / "index").read_bytes()
    return read
