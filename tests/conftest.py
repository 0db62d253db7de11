# Shared pytest fixtures for nbgit tests

import pytest
import os
import sys
import shutil
import tempfile

# Add nbgit-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'nbgit-project'))

from commands import init, add, commit
from utils import repository, config as config_utils


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def repo_config():
    # Configuration independent of the NBGIT_* variables of the machine running the tests
    return config_utils.load_config(
        overrides={'author_name': 'Test User', 'author_email': 'test@example.com'},
        environ={},
    )


@pytest.fixture
def write_file():
    # Returns a helper that writes text to root/rel_path, creating parent directories
    def _write(root, rel_path, content):
        file_path = os.path.join(root, *rel_path.split('/'))
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        with open(file_path, 'w', newline='') as f:
            f.write(content)
        return file_path
    return _write


@pytest.fixture
def temp_repo(temp_dir, repo_config):
    # Creates an initialized nbgit repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    repo = repository.Repository(temp_dir, repo_config)
    init.init(repo)

    yield repo

    os.chdir(original_dir)


@pytest.fixture
def repo_with_file(temp_repo, write_file):
    # Creates a repo with a single file (not staged)
    write_file(temp_repo.root, 'test.txt', 'Hello, World!')
    return temp_repo


@pytest.fixture
def repo_with_commit(temp_repo, write_file):
    # Creates a repo with one committed file
    write_file(temp_repo.root, 'README.md', '# Test Project\n')
    add.add(temp_repo, 'README.md')
    commit.create_commit(temp_repo, 'Initial commit')
    commit_hash = repository.get_head_commit(temp_repo)
    return temp_repo, commit_hash


@pytest.fixture
def repo_with_branches(repo_with_commit):
    # Creates a repo with main and a feature branch at the same commit
    repo, initial_commit = repo_with_commit
    repository.create_branch(repo, 'feature')
    return repo, initial_commit
