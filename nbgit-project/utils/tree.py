# What it does: Builds and reads tree objects, the snapshot of every staged file at commit time
# How it does: A tree here is flat: one "<mode> <path>\0<raw hash>" record per staged path, with the full relative path in place of
# a single name, written in index order through the object store
# What data structure it uses: List (of records in the object body), Dictionary (path -> TreeEntry when read back)

from collections import namedtuple

from . import objects

MODE_EXECUTABLE = '100755'
MODE_REGULAR = '100644'

TreeEntry = namedtuple('TreeEntry', ['mode', 'path', 'sha'])


def normalize_mode(mode): # Any execute bit -> 100755, everything else -> 100644
    if isinstance(mode, str):
        mode = int(mode, 8)
    return MODE_EXECUTABLE if mode & 0o111 else MODE_REGULAR

def serialize_tree(entries):
    records = []
    for entry in entries:
        records.append(f"{normalize_mode(entry.mode)} {entry.path}\0".encode('utf-8') + entry.sha)
    return b''.join(records)

def build_tree(repo, entries): # Writes a tree object from index entries (raw hashes) and returns its hash
    return objects.hash_object(repo, serialize_tree(entries), 'tree')

def parse_tree(body, digest_length):
    entries = []
    offset = 0
    while offset < len(body):
        space = body.find(b' ', offset)
        if space == -1:
            break
        null = body.find(b'\0', space)
        if null == -1:
            break
        entries.append(TreeEntry(
            mode=body[offset:space].decode(),
            path=body[space + 1:null].decode('utf-8'),
            sha=body[null + 1:null + 1 + digest_length].hex(),
        ))
        offset = null + 1 + digest_length
    return entries

def read_tree(repo, tree_sha): # Loads a tree object and returns {path: TreeEntry}
    obj_type, content = objects.read_object(repo, tree_sha)
    if obj_type != 'tree':
        raise TypeError(f"Object {tree_sha} is not a tree")
    return {entry.path: entry for entry in parse_tree(content, repo.hash.digest_length)}
