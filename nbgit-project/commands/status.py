# The command: nbgit status
# What it does: Provides a summary of the repository state by comparing the HEAD commit, the index (staging area), and the working directory
# How it does: It generates three dictionaries of {path: hash} for the three states, re-hashing tracked working files. Staged changes are
# HEAD vs. index, unstaged changes are index vs. workdir, untracked files are in the workdir but not the index
# What data structure it uses: Hash Table / Dictionary (to represent the three states for efficient O(1) average time complexity lookups),
# Sets (for efficient comparison of file lists to find additions/deletions in O(N) time)

from utils import messages, objects, repository, worktree
from utils import commit as commit_utils
from utils import diff as diff_utils
from utils import index as index_utils


def get_status(repo): # Classifies every path into the five status buckets
    repo.require()

    head_files = commit_utils.get_commit_files(repo, repository.get_head_commit(repo))
    head_hashes = {path: entry.sha for path, entry in head_files.items()}
    index_hashes = index_utils.read_index_hashes(repo)

    staged = diff_utils.compare_states(head_hashes, index_hashes)

    unstaged_modified = []
    untracked = []
    for file_path, rel_path in worktree.get_working_files(repo):
        if rel_path not in index_hashes:
            untracked.append(rel_path)
            continue
        working_hash = objects.hash_object(repo, repo.fs.read_bytes(file_path), 'blob', write=False)
        if working_hash != index_hashes[rel_path]:
            unstaged_modified.append(rel_path)

    return {
        'staged_added': staged['added'],
        'staged_modified': staged['modified'],
        'staged_deleted': staged['deleted'],
        'unstaged_modified': unstaged_modified,
        'untracked': untracked,
    }

def status(repo): # Compares the HEAD, index, and working directory states and returns the status text
    buckets = get_status(repo)
    branch = repository.get_current_branch(repo)

    if not any(buckets.values()):
        return messages.nothing_to_commit(branch, repository.is_root(repo))

    out = repository.get_head_status(repo) + "\n"

    if buckets['staged_added'] or buckets['staged_modified'] or buckets['staged_deleted']:
        out += messages.CHANGES_TO_BE_COMMITTED
        for path in buckets['staged_added']:
            out += messages.new_file(path) + "\n"
        for path in buckets['staged_modified']:
            out += messages.modified_file(path) + "\n"
        for path in buckets['staged_deleted']:
            out += messages.deleted_file(path) + "\n"

    if buckets['unstaged_modified']:
        out += messages.CHANGES_NOT_STAGED_FOR_COMMIT
        for path in buckets['unstaged_modified']:
            out += messages.modified_file(path) + "\n"

    if buckets['untracked']:
        out += messages.UNTRACKED_FILES
        for path in buckets['untracked']:
            out += f"\t{path}\n"

    return out.rstrip()

def run(args):
    repo = repository.open_repository()
    print(status(repo))
