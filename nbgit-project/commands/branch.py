# The command: nbgit branch [<branch-name>] | nbgit branch -d <branch-name>
# What it does: Lists branches, creates a branch at the current commit, or deletes a branch
# How it does: To create a branch, it writes the HEAD commit hash to a new file named `<branch-name>` inside `refs/heads`.
# To list branches, it reads all the filenames in that directory and prints them, marking the current one with an asterisk.
# To delete one, it removes that file unless it is the checked-out branch
# What data structure it uses: Map / Dictionary (conceptually, the `refs/heads` directory maps branch names to commit hashes), List (to hold
# branch names for sorting and display)

from utils import messages, repository
from utils.errors import BranchNameRequired, NotValidObjectName

DELETE_FLAG = '-d'


def branch(repo, *args):
    """
    No arguments lists branches; one creates a branch; '-d <name>' deletes one.
    Any other two-argument form names an invalid object, and longer forms do nothing.
    """
    repo.require()

    if len(args) == 0:
        current_branch = repository.get_current_branch(repo)
        lines = []
        for name in repository.get_all_branches(repo):
            marker = '*' if name == current_branch else ' '
            lines.append(f"{marker} {name}")
        return "\n".join(lines)

    if len(args) > 2:
        return ""

    if len(args) == 2:
        if args[0] != DELETE_FLAG:
            raise NotValidObjectName(args[0])
        repository.delete_branch(repo, args[1])
        return messages.deleted_branch(args[1])

    name = args[0]
    if name == DELETE_FLAG:
        raise BranchNameRequired()
    commit_hash = repository.create_branch(repo, name)
    return messages.created_branch(name, commit_hash[:7])

def run(args):
    repo = repository.open_repository()
    branch_args = ([DELETE_FLAG] if args.delete else []) + list(args.names)
    output = branch(repo, *branch_args)
    if output:
        print(output)
