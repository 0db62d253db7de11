# The command: nbgit switch <branch-name>
# What it does: Switches branches, replacing the tracked working files and the index with the branch's last commit
# How it does: Validates the single argument, then hands over to `repository.switch_to`, which resolves the target commit, rewrites
# the working tree and index and finally points HEAD at the branch
# What data structure it uses: Dictionary (the target tree's path -> entry map)

from utils import messages, repository
from utils.errors import NotSupportedCommand, UsageError


def switch(repo, *args):
    repo.require()

    if len(args) != 1:
        raise NotSupportedCommand(" ".join(args))

    name = args[0].strip()
    if not name:
        raise UsageError(messages.MISSING_BRANCH_OR_COMMIT_ARGUMENT)

    repository.switch_to(repo, name)
    return messages.switched_to_branch(name)

def run(args):
    repo = repository.open_repository()
    print(switch(repo, *args.names))
