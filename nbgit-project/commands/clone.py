# The command: nbgit clone <source> <destination>
# What it does: Makes a local copy of a repository: its whole metadata directory plus its working files
# How it does: The metadata directory is copied file by file, byte for byte, without re-deriving or validating the object graph.
# Working files are then copied from the source root, skipping the fixed exclusions, creating destination directories as needed
# What data structure it uses: Tree (a recursive walk of both directory trees)

import logging
import os

from utils import messages, worktree
from utils.config import load_config
from utils.errors import NotSupportedCommand, RepositoryNotFound
from utils.filesystem import FileSystem

logger = logging.getLogger(__name__)


def clone(*args, cwd='.', config=None, fs=None): # Copies the repository at args[0] to args[1]; relative paths resolve against cwd
    if len(args) != 2:
        raise NotSupportedCommand(" ".join(args))

    source, destination = args
    config = config or load_config()
    fs = fs or FileSystem()
    base = os.path.abspath(cwd)

    source_root = source if os.path.isabs(source) else os.path.join(base, source)
    source_repo_dir = os.path.join(source_root, config.repository_dir_name)
    if not fs.is_dir(source_repo_dir):
        raise RepositoryNotFound(source_repo_dir)

    destination_root = destination if os.path.isabs(destination) else os.path.join(base, destination)
    fs.mkdir(destination_root)

    # Listed before copying, in case the destination lies inside the source
    working_files = worktree.list_files(fs, source_root, worktree.FIXED_EXCLUSIONS | {config.repository_dir_name})

    _copy_tree(fs, source_repo_dir, os.path.join(destination_root, config.repository_dir_name))
    _copy_files(fs, working_files, destination_root)

    logger.debug("cloned %s into %s (%d working files)", source_root, destination_root, len(working_files))
    return messages.cloning_into(destination)

def _copy_tree(fs, src, dest): # Recursive copy, empty directories included
    fs.mkdir(dest)
    for name, is_dir, is_file in fs.list_dir(src):
        if is_dir:
            _copy_tree(fs, os.path.join(src, name), os.path.join(dest, name))
        elif is_file:
            fs.copy_file(os.path.join(src, name), os.path.join(dest, name))

def _copy_files(fs, files, destination_root):
    for file_path, rel_path in files:
        target = os.path.join(destination_root, *rel_path.split('/'))
        fs.mkdir(os.path.dirname(target))
        fs.copy_file(file_path, target)

def run(args):
    print(clone(args.source, args.destination))
