# The command: nbgit add <file>...
# What it does: Takes a snapshot of files from the working directory and stages them for the next commit by updating the index
# How it does: Every named path is checked before anything is written. Stale entries (files that no longer exist) are dropped, then
# each file is hashed into a blob and its entry refreshed unless hash, mode, size and mtime all still match. The index file is
# rewritten only when something changed
# What data structure it uses: Hash Table / Dictionary (the index in memory, in insertion order), List (of files to add), and performs
# a Tree Traversal (when expanding `.`)

import logging
import os

from utils import objects, repository, worktree
from utils import index as index_utils
from utils import tree as tree_utils
from utils.errors import NothingSpecifiedNothingAdded, PathspecMismatch

logger = logging.getLogger(__name__)

WILDCARDS = ('.', './', '*')


def add(repo, *paths): # Stages the given paths and returns the relative paths whose entries changed
    repo.require()

    names = [p for p in paths if p.strip()]
    if not names:
        raise NothingSpecifiedNothingAdded()

    files_to_add = _expand_files(repo, names)

    index = index_utils.read_index(repo)
    changed = _prune_stale_entries(repo, index)

    staged = []
    for file_path, rel_path in files_to_add:
        stats = repo.fs.stat(file_path)
        content = repo.fs.read_bytes(file_path)
        sha = bytes.fromhex(objects.hash_object(repo, content, 'blob'))
        mode = int(tree_utils.normalize_mode(stats.st_mode), 8)

        previous = index.get(rel_path)
        if (previous is not None
                and previous.sha == sha
                and previous.mode == mode
                and previous.size == index_utils.to_uint32(stats.st_size)
                and previous.mtime == index_utils.to_uint32(int(stats.st_mtime))):
            continue

        # A refreshed entry moves to the end of the index
        index.pop(rel_path, None)
        index[rel_path] = index_utils.entry_from_stat(rel_path, stats, sha, mode)
        staged.append(rel_path)
        changed = True

    if changed:
        index_utils.write_index(repo, index)
    return staged

def _prune_stale_entries(repo, index): # Drops entries whose file is gone from the working tree; True if any were dropped
    stale = [path for path in index if not repo.fs.exists(os.path.join(repo.root, *path.split('/')))]
    for path in stale:
        logger.debug("dropping stale index entry %s", path)
        del index[path]
    return bool(stale)

def _expand_files(repo, names):
    """
    Expands arguments into (absolute path, relative path) pairs.
    Wildcards ('.', './', '*') select every file of the working tree; directories expand to the files under them.
    Every literal path must exist, otherwise nothing is staged.
    """
    exclusions = worktree.get_exclusions(repo)
    if any(name in WILDCARDS for name in names):
        return worktree.get_working_files(repo)

    expanded = []
    for name in names:
        rel_path = worktree.normalize_path(name)
        file_path = os.path.join(repo.root, *rel_path.split('/')) if rel_path else repo.root
        if rel_path.startswith('../') or rel_path == '..' or not repo.fs.exists(file_path):
            raise PathspecMismatch(name)
        if worktree.is_excluded(rel_path, exclusions):
            continue
        if repo.fs.is_dir(file_path):
            expanded.extend(worktree.list_files(repo.fs, repo.root, exclusions, rel_path))
        else:
            expanded.append((file_path, rel_path))

    seen = set()
    unique = []
    for file_path, rel_path in expanded:
        if rel_path not in seen:
            seen.add(rel_path)
            unique.append((file_path, rel_path))
    return unique

def run(args):
    repo = repository.open_repository()
    paths = []
    for name in args.files:
        if name in WILDCARDS or not name.strip():
            paths.append(name)
        else:
            # Arguments are relative to the current directory; the index stores paths relative to the root
            paths.append(os.path.relpath(os.path.abspath(name), repo.root))
    add(repo, *paths)
