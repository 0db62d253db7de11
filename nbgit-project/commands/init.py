# The command: nbgit init
# What it does: Initializes a new, empty repository by creating the metadata directory and its internal structure
# How it does: It creates the `objects` and `refs/heads` subdirectories. It then creates the `HEAD` file and writes a symbolic reference
# pointing to the default branch. Running it again reinitializes: missing directories are recreated, an existing HEAD is kept
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table
# (the object database) and a Directed Acyclic Graph (the commit history)

import os

from utils import messages, repository
from utils.errors import UsageError


def init(repo, *args): # Creates the repository layout and reports whether it was fresh or already there
    if args:
        raise UsageError(messages.USAGE_INIT)

    exist = repo.exists()

    repo.fs.mkdir(repo.path('objects'))
    repo.fs.mkdir(repo.path('refs', 'heads'))

    # The default branch ref itself stays absent until the first commit
    if repository.read_head(repo) is None:
        repository.write_head(repo, repo.config.default_branch)

    return messages.initialized_repository(repo.repo_dir + os.sep, exist)

def run(args):
    repo = repository.Repository(os.getcwd())
    print(init(repo, *args.args))
