# What it does: Lists the files of a working tree, skipping the metadata directory and the other fixed exclusions
# How it does: An explicit recursive walk through the filesystem capability. Excluded names are dropped before recursing, and
# relative paths are normalized to forward slashes so they match index and tree paths on every platform
# What data structure it uses: Set (the exclusion names), List (of (absolute path, relative path) pairs)

import os
import posixpath

FIXED_EXCLUSIONS = {'.git'}


def get_exclusions(repo):
    return FIXED_EXCLUSIONS | {repo.config.repository_dir_name}

def is_excluded(rel_path, exclusions): # True if any component of the relative path is an excluded name
    return any(part in exclusions for part in rel_path.split('/'))

def normalize_path(path): # "./src\\a.txt" -> "src/a.txt"
    path = path.replace(os.sep, '/').replace('\\', '/')
    normalized = posixpath.normpath(path)
    return '' if normalized == '.' else normalized

def list_files(fs, root, exclusions, base=''):
    """
    Recursively collects (absolute path, relative path) for every regular file under root/base.
    """
    paths = []
    for name, is_dir, is_file in fs.list_dir(fs.join(root, base) if base else root):
        if name in exclusions:
            continue
        rel_path = f"{base}/{name}" if base else name
        if is_dir:
            paths.extend(list_files(fs, root, exclusions, rel_path))
        elif is_file:
            paths.append((fs.join(root, *rel_path.split('/')), rel_path))
    return paths

def get_working_files(repo): # Every trackable file of the repository's working tree
    return list_files(repo.fs, repo.root, get_exclusions(repo))

def remove_empty_dirs(fs, root, rel_path): # Removes the now-empty parent directories of rel_path, stopping at root
    parts = rel_path.split('/')[:-1]
    while parts:
        directory = fs.join(root, *parts)
        if not fs.is_dir(directory) or any(True for _ in fs.list_dir(directory)):
            return
        fs.rmdir(directory)
        parts.pop()
