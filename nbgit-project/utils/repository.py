# What it does: Provides high-level functions for interacting with the repository structure, like finding the repo root and managing
# branch pointers, and the branch switch that resets the working tree
# How it does: A Repository carries the root, the injected configuration and filesystem, and the selected hash algorithm. The ref
# functions read/write `HEAD` and the files in `refs/heads`. HEAD is always symbolic ("ref: refs/heads/<name>"); a repository is
# "root" until the branch HEAD names holds a full-length hash, then "attached"
# What data structure it uses: Uses recursion to find the repo root. Conceptually, it manages pointers (the `HEAD` file and branch
# files), which are fundamental components of data structures like Graphs and Linked Lists

import logging
import os

from . import hashing, objects, worktree
from . import commit as commit_utils
from . import index as index_utils
from . import tree as tree_utils
from .config import load_config
from .errors import (
    BranchAlreadyExists,
    BranchNotFound,
    BrokenBranchHead,
    CannotDeleteCheckedOutBranch,
    InvalidBranchName,
    NotARepository,
    NotValidObjectName,
    PathspecMismatch,
    UntrackedFileInTheWay,
)
from .filesystem import FileSystem

logger = logging.getLogger(__name__)

PREFIX_REF = 'ref: '
REFS_HEADS = 'refs/heads/'

STATE_NO_REPOSITORY = 'no-repository'
STATE_ROOT = 'root'
STATE_ATTACHED = 'attached'


class Repository:
    """A working tree root plus its metadata directory."""

    def __init__(self, root, config=None, fs=None):
        self.root = os.path.abspath(root)
        self.config = config or load_config()
        self.fs = fs or FileSystem()
        self.hash = hashing.get_hash_module(self.config.hash_algorithm)
        self.repo_dir = os.path.join(self.root, self.config.repository_dir_name)

    def path(self, *parts): # Path under the metadata directory
        return os.path.join(self.repo_dir, *parts)

    def exists(self):
        return self.fs.is_dir(self.repo_dir)

    def require(self): # Raises NotARepository unless the metadata directory exists
        if not self.exists():
            raise NotARepository(self.config.repository_dir_name)

    def __repr__(self):
        return f"Repository({self.root!r})"


def find_repo_root(path='.', dir_name='.nbgit'): # Recursively searches for the metadata directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, dir_name)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path, dir_name)


def branch_path(repo, branch_name):
    return repo.path('refs', 'heads', *branch_name.split('/'))

def is_valid_branch_name(branch_name): # False for names that would resolve outside refs/heads
    if not branch_name or branch_name.startswith('/') or '\\' in branch_name:
        return False
    return all(part not in ('', '.', '..') for part in branch_name.split('/'))

def read_head(repo): # Raw HEAD content, or None when there is no HEAD file
    head_path = repo.path('HEAD')
    if not repo.fs.is_file(head_path):
        return None
    return repo.fs.read_bytes(head_path).decode('utf-8').strip()

def write_head(repo, branch_name):
    repo.fs.write_bytes(repo.path('HEAD'), f"{PREFIX_REF}{REFS_HEADS}{branch_name}\n".encode('utf-8'))
    logger.debug("HEAD -> %s", branch_name)

def get_current_branch(repo): # Name of the branch HEAD points to; the default branch when HEAD is missing or unreadable
    head_content = read_head(repo)
    if head_content and head_content.startswith(PREFIX_REF + REFS_HEADS):
        return head_content[len(PREFIX_REF + REFS_HEADS):].strip()
    return repo.config.default_branch

def read_ref(repo, branch_name): # Stripped content of a branch ref file, or None if the branch doesn't exist
    path = branch_path(repo, branch_name)
    if not repo.fs.is_file(path):
        return None
    return repo.fs.read_bytes(path).decode('utf-8').strip()

def get_branch_commit(repo, branch_name): # The commit hash a branch points to, or None if absent or malformed
    sha = read_ref(repo, branch_name)
    return sha if repo.hash.is_valid_hex(sha) else None

def get_head_commit(repo): # Retrieves the commit hash that HEAD points to, or None if there are no commits
    if not repo.exists():
        return None
    return get_branch_commit(repo, get_current_branch(repo))

def get_head_state(repo):
    if not repo.exists():
        return STATE_NO_REPOSITORY
    if get_head_commit(repo) is None:
        return STATE_ROOT
    return STATE_ATTACHED

def is_root(repo):
    return get_head_state(repo) != STATE_ATTACHED

def get_head_status(repo): # Returns a user-friendly string describing HEAD state
    return f"On branch {get_current_branch(repo)}"

def get_all_branches(repo): # Lists all branch names by reading the refs/heads directory
    heads_dir = repo.path('refs', 'heads')
    if not repo.fs.is_dir(heads_dir):
        return []
    return sorted(rel_path for _, rel_path in worktree.list_files(repo.fs, heads_dir, set()))

def get_branch_map(repo): # {commit hash: [branch names]} for every branch holding a valid hash
    branch_map = {}
    for name in get_all_branches(repo):
        sha = get_branch_commit(repo, name)
        if sha:
            branch_map.setdefault(sha, []).append(name)
    return branch_map

def update_branch(repo, branch_name, commit_hash):
    if not is_valid_branch_name(branch_name):
        raise InvalidBranchName(branch_name)
    repo.fs.write_bytes(branch_path(repo, branch_name), f"{commit_hash}\n".encode('utf-8'))
    logger.debug("refs/heads/%s -> %s", branch_name, commit_hash)

def create_branch(repo, branch_name, commit_hash=None): # Creates a new branch pointing at commit_hash (HEAD's commit by default)
    if not is_valid_branch_name(branch_name):
        raise InvalidBranchName(branch_name)
    if repo.fs.exists(branch_path(repo, branch_name)):
        raise BranchAlreadyExists(branch_name)
    if commit_hash is None:
        commit_hash = get_head_commit(repo)
    if not commit_hash:
        raise NotValidObjectName(get_current_branch(repo))
    update_branch(repo, branch_name, commit_hash)
    return commit_hash

def delete_branch(repo, branch_name):
    # Only names listed under refs/heads can be deleted
    if branch_name not in get_all_branches(repo):
        raise BranchNotFound(branch_name)
    if branch_name == get_current_branch(repo):
        raise CannotDeleteCheckedOutBranch(branch_name, repo.root)
    repo.fs.unlink(branch_path(repo, branch_name))
    logger.debug("deleted refs/heads/%s", branch_name)


def switch_to(repo, branch_name):
    """
    Checks out a branch: resets tracked working files and the index to the branch's commit, then points HEAD at it.
    The target is fully resolved before anything on disk changes.
    """
    if not is_valid_branch_name(branch_name) or not repo.fs.is_file(branch_path(repo, branch_name)):
        raise PathspecMismatch(branch_name)
    target_commit = read_ref(repo, branch_name)
    if not repo.hash.is_valid_hex(target_commit):
        raise BrokenBranchHead(branch_name)

    target_files = commit_utils.get_commit_files(repo, target_commit)
    contents = {}
    for path, entry in target_files.items():
        _, contents[path] = objects.read_object(repo, entry.sha)

    tracked = set(index_utils.read_index(repo))
    tracked.update(commit_utils.get_commit_files(repo, get_head_commit(repo)))

    working_files = worktree.get_working_files(repo)
    blocked = _find_blocked_path(repo, target_files, contents, tracked, working_files)
    if blocked:
        raise UntrackedFileInTheWay(blocked)

    for file_path, rel_path in working_files:
        if rel_path not in tracked:
            continue
        repo.fs.unlink(file_path)
        worktree.remove_empty_dirs(repo.fs, repo.root, rel_path)

    entries = []
    for path, entry in target_files.items():
        file_path = os.path.join(repo.root, *path.split('/'))
        repo.fs.write_bytes(file_path, contents[path])
        if entry.mode == tree_utils.MODE_EXECUTABLE:
            repo.fs.chmod(file_path, repo.fs.stat(file_path).st_mode | 0o111)
        # Stat data is zeroed; the next add re-stats the file
        entries.append(index_utils.IndexEntry(
            ctime=0, mtime=0, dev=0, ino=0,
            mode=int(entry.mode, 8),
            uid=0, gid=0, size=0,
            sha=bytes.fromhex(entry.sha),
            path=path,
        ))
    index_utils.write_index(repo, entries)

    write_head(repo, branch_name)
    logger.debug("switched to %s at %s (%d files)", branch_name, target_commit, len(entries))
    return target_commit

def _find_blocked_path(repo, target_files, contents, tracked, working_files):
    """
    Returns the first untracked path that writing the target files would clobber, or None.
    An untracked file may not stand where a target needs a directory. An untracked file at a target path blocks it only
    when its content differs. A directory at a target path must hold nothing but tracked files.
    """
    working = [rel_path for _, rel_path in working_files]
    for path in target_files:
        parts = path.split('/')
        for depth in range(1, len(parts)):
            prefix = '/'.join(parts[:depth])
            prefix_path = os.path.join(repo.root, *parts[:depth])
            if repo.fs.exists(prefix_path) and not repo.fs.is_dir(prefix_path) and prefix not in tracked:
                return prefix

        file_path = os.path.join(repo.root, *parts)
        if repo.fs.is_dir(file_path):
            under = [rel_path for rel_path in working if rel_path.startswith(path + '/')]
            if not under or any(rel_path not in tracked for rel_path in under):
                return path
        elif repo.fs.exists(file_path) and path not in tracked:
            if repo.fs.read_bytes(file_path) != contents[path]:
                return path
    return None

def open_repository(path='.', config=None, fs=None): # Repository containing `path`, or one rooted at `path` when none is found
    config = config or load_config()
    root = find_repo_root(path, config.repository_dir_name) or os.path.abspath(path)
    return Repository(root, config, fs)
