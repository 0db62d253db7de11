# The command: nbgit commit -m "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the currently staged changes.
# How it does: It writes a flat tree object from the index, loads the parent commit (if any) to compare trees, writes the commit
# object and moves the current branch to it. The summary is worked out before the commit is written: it compares the new tree with
# the parent's for renames (via the rename detector), created and deleted files, and line counts for modified ones
# What data structure it uses: Directed Acyclic Graph (DAG) (each commit links to its parent, forming the history graph),
# Hash Table / Dictionary (the underlying object store, and the path -> entry maps being compared)

import logging
from collections import namedtuple

from utils import config, messages, objects, repository
from utils import commit as commit_utils
from utils import diff as diff_utils
from utils import index as index_utils
from utils import tree as tree_utils
from utils.errors import NothingToCommit, PathspecMismatch, UsageError

logger = logging.getLogger(__name__)

Changes = namedtuple('Changes', ['files_changed', 'insertions', 'deletions', 'detail_lines'])


def create_commit(repo, message): # Creates a commit object, updates the current branch and returns the summary text
    repo.require()

    if not message or not message.strip():
        raise UsageError(messages.EMPTY_COMMIT_MESSAGE)

    branch = repository.get_current_branch(repo)
    is_root = repository.is_root(repo)

    index = index_utils.read_index(repo)
    if not index:
        raise NothingToCommit(branch, is_root)
    entries = list(index.values())

    tree_hash = tree_utils.build_tree(repo, entries)

    parent = repository.get_head_commit(repo)
    parent_files = {}
    if parent:
        # The parent's tree comes from the parent commit object itself
        parent_tree = commit_utils.read_commit(repo, parent).tree
        if parent_tree == tree_hash:
            raise NothingToCommit(branch, is_root)
        parent_files = tree_utils.read_tree(repo, parent_tree)

    # Every blob the summary needs is read before the branch moves
    changes = collect_changes(repo, is_root, entries, parent_files)

    author_name, author_email = config.get_author(repo)
    commit_hash = commit_utils.build_commit(repo, tree_hash, parent, message, author_name, author_email)
    repository.update_branch(repo, branch, commit_hash)

    logger.debug("committed %s on %s: %d files, +%d -%d",
                 commit_hash, branch, changes.files_changed, changes.insertions, changes.deletions)
    return format_summary(branch, is_root, commit_hash, message, changes)

def _blob_text(repo, sha):
    _, content = objects.read_object(repo, sha)
    return content.decode('utf-8', errors='replace')

def collect_changes(repo, is_root, entries, parent_files):
    """
    Compares the staged entries with the parent's files.
    Returns a Changes tuple: files changed, line totals and the rename, create and delete detail lines in that order.
    """
    insertions = deletions = 0
    renamed_lines, created_lines, deleted_lines = [], [], []
    changed = []

    if is_root:
        for entry in entries:
            insertions += diff_utils.count_lines(_blob_text(repo, entry.sha.hex()))
            created_lines.append(f" create mode {tree_utils.normalize_mode(entry.mode)} {entry.path}")
            changed.append(entry.path)
    else:
        staged_paths = {entry.path for entry in entries}
        deleted = [
            diff_utils.FileState(path, prev.mode, prev.sha, _blob_text(repo, prev.sha))
            for path, prev in parent_files.items() if path not in staged_paths
        ]
        created = [
            diff_utils.FileState(entry.path, tree_utils.normalize_mode(entry.mode), entry.sha.hex(),
                                 _blob_text(repo, entry.sha.hex()))
            for entry in entries if entry.path not in parent_files
        ]

        renames, deleted_remaining, created_remaining = diff_utils.detect_renames(deleted, created)

        for rename in renames:
            renamed_lines.append(f" rename {rename.old_path} => {rename.new_path} ({rename.similarity}%)")
            changed.append(rename.new_path)
        for file in deleted_remaining:
            deleted_lines.append(f" delete mode {file.mode} {file.path}")
            changed.append(file.path)
            deletions += diff_utils.count_lines(file.text)
        for file in created_remaining:
            created_lines.append(f" create mode {file.mode} {file.path}")
            changed.append(file.path)
            insertions += diff_utils.count_lines(file.text)

        renamed_targets = {rename.new_path for rename in renames}
        for entry in entries:
            prev = parent_files.get(entry.path)
            if prev is None or entry.path in renamed_targets:
                continue
            if tree_utils.normalize_mode(entry.mode) == prev.mode and entry.sha.hex() == prev.sha:
                continue
            added, removed = diff_utils.line_diff_counts(_blob_text(repo, prev.sha), _blob_text(repo, entry.sha.hex()))
            insertions += added
            deletions += removed
            changed.append(entry.path)

    return Changes(len(set(changed)), insertions, deletions, renamed_lines + created_lines + deleted_lines)

def format_summary(branch, is_root, commit_hash, message, changes):
    subject = message.splitlines()[0]
    root_marker = " (root-commit)" if is_root else ""
    lines = [f"[{branch}{root_marker} {commit_hash[:7]}] {subject}"]

    stat_line = f" {messages.plural(changes.files_changed, 'file')} changed"
    if is_root and changes.insertions == 0 and changes.deletions == 0:
        stat_line += ", 0 insertions(+), 0 deletions(-)"
    else:
        if changes.insertions:
            stat_line += f", {messages.plural(changes.insertions, 'insertion')}(+)"
        if changes.deletions:
            stat_line += f", {messages.plural(changes.deletions, 'deletion')}(-)"
    lines.append(stat_line)

    lines.extend(changes.detail_lines)
    return '\n'.join(lines)

def run(args):
    if args.pathspec:
        raise PathspecMismatch(args.pathspec[0])
    repo = repository.open_repository()
    print(create_commit(repo, args.message))
