# What it does: Manages the low-level object database, handling the storage and retrieval of all blobs, trees, and commits
# How it does: It implements a content-addressed storage system. `hash_object` saves content and returns its hash; an object that
# is already on disk is never rewritten. `read_object` retrieves content using its hash
# What data structure it uses: Hash Table / Dictionary (the entire object store is a content-addressed dictionary where the
# digest is the key)

import logging
import zlib

from .errors import ObjectNotFound

logger = logging.getLogger(__name__)


def object_path(repo, sha): # objects/<first two hex chars>/<remaining hex chars>
    return repo.path('objects', sha[:2], sha[2:])

def hash_object(repo, content, obj_type, write=True): # Hashes content and optionally writes it as an object of the given type ('blob', 'tree', 'commit')
    header = f'{obj_type} {len(content)}\0'.encode()
    data = header + content

    sha = repo.hash.hex(data)

    if write:
        path = object_path(repo, sha)
        if repo.fs.exists(path):
            logger.debug("%s %s already stored", obj_type, sha)
        else:
            repo.fs.mkdir(repo.path('objects', sha[:2]))
            repo.fs.write_bytes(path, zlib.compress(data))
            logger.debug("wrote %s %s (%d bytes)", obj_type, sha, len(content))

    return sha

def object_exists(repo, sha):
    if not sha or len(sha) < 3:
        return False
    return repo.fs.exists(object_path(repo, sha))

def read_object(repo, sha): # Reads an object by its hash and returns its type and content
    if not object_exists(repo, sha):
        raise ObjectNotFound(sha)

    data = zlib.decompress(repo.fs.read_bytes(object_path(repo, sha)))

    null_byte_index = data.find(b'\0')
    header = data[:null_byte_index].decode()
    content = data[null_byte_index + 1:]

    obj_type, _ = header.split(' ')

    return obj_type, content
