import argparse
import logging
import os
import sys

from commands import (
    init, add, commit, log, status, config,
    branch, switch, clone
)
from utils.errors import NbgitError

LOG_LEVEL_ENV = 'NBGIT_LOG_LEVEL'


def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(prog="nbgit", description="nbgit: a miniature git-compatible version control system.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log internal steps to stderr.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository or reinitialize an existing one.")
    init_parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Add file contents to the index.")
    add_parser.add_argument("files", nargs="*", help="Files to add ('.' adds everything).")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record changes to the repository.")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message.")
    commit_parser.add_argument("pathspec", nargs="*", help=argparse.SUPPRESS)
    commit_parser.set_defaults(func=commit.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show commit logs.")
    log_parser.set_defaults(func=log.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set user name and email.")
    config_parser.add_argument("key", help="The configuration key (e.g., user.name).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="List, create, or delete branches.")
    branch_parser.add_argument("-d", dest="delete", action="store_true", help="Delete the named branch.")
    branch_parser.add_argument("names", nargs="*", help="The branch name.")
    branch_parser.set_defaults(func=branch.run)

    # Command: switch
    switch_parser = subparsers.add_parser("switch", help="Switch branches.")
    switch_parser.add_argument("names", nargs="*", help="The branch to switch to.")
    switch_parser.set_defaults(func=switch.run)

    # Command: clone
    clone_parser = subparsers.add_parser("clone", help="Copy a local repository into a new directory.")
    clone_parser.add_argument("source", help="Path of the repository to clone.")
    clone_parser.add_argument("destination", help="Directory to clone into.")
    clone_parser.set_defaults(func=clone.run)

    return parser

def _configure_logging(verbose):
    level = logging.DEBUG if verbose else os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

# The main entry point for the nbgit version control system
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        args.func(args)
    except NbgitError as e:
        print(e, file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
