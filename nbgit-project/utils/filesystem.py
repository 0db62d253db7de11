# What it does: The filesystem capability every nbgit operation goes through (stat, read, write, mkdir, list, remove)
# How it does: A thin wrapper over `os` and `shutil`. A Repository receives an instance at construction, so tests or embedders can
# hand in a different implementation with the same methods
# What data structure it uses: None beyond what `os` returns

import os
import shutil


class FileSystem:

    def join(self, *parts):
        return os.path.join(*parts)

    def exists(self, path):
        return os.path.exists(path)

    def is_dir(self, path):
        return os.path.isdir(path)

    def is_file(self, path):
        return os.path.isfile(path)

    def stat(self, path):
        return os.stat(path)

    def read_bytes(self, path):
        with open(path, 'rb') as f:
            return f.read()

    def write_bytes(self, path, data): # Whole-file rewrite; the parent directory is created if missing
        parent = os.path.dirname(path)
        if parent and not os.path.isdir(parent):
            os.makedirs(parent, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(data)

    def mkdir(self, path):
        os.makedirs(path, exist_ok=True)

    def list_dir(self, path): # Yields (name, is_dir, is_file) for each directory entry, sorted by name
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
        for entry in entries:
            yield entry.name, entry.is_dir(follow_symlinks=False), entry.is_file(follow_symlinks=False)

    def unlink(self, path):
        os.unlink(path)

    def rmdir(self, path):
        os.rmdir(path)

    def chmod(self, path, mode):
        os.chmod(path, mode)

    def copy_file(self, src, dest):
        shutil.copyfile(src, dest)
