# The command: nbgit log
# What it does: Displays the commit history by starting at the current HEAD and walking backward through the parent links
# How it does: It first maps every branch's commit hash to its branch names for decorations. Then it starts with the HEAD commit and
# enters a loop: read the commit object, format it, follow its parent. The walk ends at a root commit or at a parent object that
# cannot be loaded
# What data structure it uses: It performs a Graph Traversal (a linear traversal up the parent chain) on the Directed Acyclic Graph (DAG)
# formed by the commits, and a Dictionary (hash -> branch names) for decorations

import logging

from utils import repository
from utils import commit as commit_utils
from utils.errors import NoCommitsYet, ObjectNotFound

logger = logging.getLogger(__name__)


def _decoration(commit_hash, branch_map, current_branch, is_head):
    names = branch_map.get(commit_hash, [])
    if is_head:
        others = [name for name in names if name != current_branch]
        return f" (HEAD -> {', '.join([current_branch] + others)})"
    if names:
        return f" ({', '.join(names)})"
    return ""

def log(repo): # Returns the formatted history reachable from HEAD
    repo.require()

    current_branch = repository.get_current_branch(repo)
    commit_hash = repository.get_head_commit(repo)
    if not commit_hash:
        raise NoCommitsYet(current_branch)

    branch_map = repository.get_branch_map(repo)

    entries = []
    is_head = True
    while commit_hash:
        try:
            commit = commit_utils.read_commit(repo, commit_hash)
        except ObjectNotFound:
            logger.debug("history stops at missing commit %s", commit_hash)
            break

        lines = [f"commit {commit_hash}{_decoration(commit_hash, branch_map, current_branch, is_head)}"]
        is_head = False

        author = commit.author
        if author and author.name and author.email:
            lines.append(f"Author: {author.name} <{author.email}>")
        if author:
            lines.append(f"Date:   {commit_utils.format_log_date(author.timestamp, author.tz_offset)}")

        lines.append("")
        if commit.message.strip():
            lines.append("    " + commit.message.replace("\n", "\n    "))

        entries.append("\n".join(lines))
        commit_hash = commit.parent

    return "\n\n".join(entries)

def run(args):
    repo = repository.open_repository()
    print(log(repo))
