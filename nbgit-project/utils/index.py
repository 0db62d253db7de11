# What it does: Provides centralized read/write operations for the binary index (staging area) file
# How it does: Packs and unpacks the git "DIRC" version 2 layout with `struct`: a 12-byte header, one fixed-size record per entry
# followed by its NUL-terminated path padded to 8 bytes, and a trailing digest of everything before it
# What data structure it uses: Dictionary (mapping file paths to IndexEntry tuples, kept in insertion order, not sorted)

import logging
import struct
from collections import namedtuple

logger = logging.getLogger(__name__)

INDEX_SIGNATURE = b'DIRC'
INDEX_VERSION = 2
HEADER_FORMAT = '>4sLL'
STAT_FORMAT = '>10L'
FLAGS_FORMAT = '>H'
MAX_PATH_FLAG = 0xFFF

IndexEntry = namedtuple('IndexEntry', [
    'ctime', 'mtime', 'dev', 'ino', 'mode', 'uid', 'gid', 'size', 'sha', 'path',
])


def to_uint32(value):
    return int(value) & 0xFFFFFFFF

def entry_size(digest_length): # Fixed part of an entry: ten 32-bit stat words, the raw hash and the 16-bit flags
    return struct.calcsize(STAT_FORMAT) + digest_length + struct.calcsize(FLAGS_FORMAT)

def _padding(fixed_size, path_length):
    return (8 - ((fixed_size + path_length + 1) % 8)) % 8


def build_index(entries, hash_module):
    """
    Serializes entries into index file bytes, in the order given.
    The trailer is the digest of the header and entries.
    """
    fixed_size = entry_size(hash_module.digest_length)
    parts = [struct.pack(HEADER_FORMAT, INDEX_SIGNATURE, INDEX_VERSION, len(entries))]

    for entry in entries:
        if len(entry.sha) != hash_module.digest_length:
            raise ValueError(
                f"index entry {entry.path!r} has a {len(entry.sha)}-byte hash, expected {hash_module.digest_length}")
        path = entry.path.encode('utf-8')
        parts.append(struct.pack(
            STAT_FORMAT,
            to_uint32(entry.ctime), 0,
            to_uint32(entry.mtime), 0,
            to_uint32(entry.dev),
            to_uint32(entry.ino),
            to_uint32(entry.mode),
            to_uint32(entry.uid),
            to_uint32(entry.gid),
            to_uint32(entry.size),
        ))
        parts.append(entry.sha)
        parts.append(struct.pack(FLAGS_FORMAT, min(len(path), MAX_PATH_FLAG)))
        parts.append(path + b'\0')
        parts.append(b'\0' * _padding(fixed_size, len(path)))

    body = b''.join(parts)
    return body + hash_module.raw(body)

def parse_index(data, hash_module):
    """
    Parses index file bytes into a list of IndexEntry.
    A buffer without the DIRC signature yields an empty list. The trailing checksum is not verified.
    """
    if data[:4] != INDEX_SIGNATURE:
        return []

    digest_length = hash_module.digest_length
    fixed_size = entry_size(digest_length)
    _, _, count = struct.unpack_from(HEADER_FORMAT, data, 0)
    offset = struct.calcsize(HEADER_FORMAT)

    entries = []
    for _ in range(count):
        ctime, _, mtime, _, dev, ino, mode, uid, gid, size = struct.unpack_from(STAT_FORMAT, data, offset)
        offset += struct.calcsize(STAT_FORMAT)
        sha = data[offset:offset + digest_length]
        offset += digest_length
        offset += struct.calcsize(FLAGS_FORMAT)

        end = data.index(b'\0', offset)
        path = data[offset:end].decode('utf-8')
        offset = end + 1 + _padding(fixed_size, end - offset)

        entries.append(IndexEntry(ctime, mtime, dev, ino, mode, uid, gid, size, sha, path))
    return entries


def index_path(repo):
    return repo.path('index')

def read_index(repo):
    """
    Reads the index file and returns a dictionary {path: IndexEntry}, in file order.
    Returns an empty dictionary when there is no index yet.
    """
    path = index_path(repo)
    if not repo.fs.exists(path):
        return {}
    entries = parse_index(repo.fs.read_bytes(path), repo.hash)
    return {entry.path: entry for entry in entries}

def read_index_hashes(repo):
    return {path: entry.sha.hex() for path, entry in read_index(repo).items()}

def write_index(repo, entries): # Rewrites the whole index file; accepts a {path: entry} dictionary or a list of entries
    if isinstance(entries, dict):
        entries = list(entries.values())
    repo.fs.write_bytes(index_path(repo), build_index(entries, repo.hash))
    logger.debug("wrote index with %d entries", len(entries))

def entry_from_stat(path, stats, sha, mode): # Builds an entry from os.stat data, truncating times to whole seconds
    return IndexEntry(
        ctime=to_uint32(int(stats.st_ctime)),
        mtime=to_uint32(int(stats.st_mtime)),
        dev=to_uint32(stats.st_dev),
        ino=to_uint32(stats.st_ino),
        mode=to_uint32(mode),
        uid=to_uint32(stats.st_uid),
        gid=to_uint32(stats.st_gid),
        size=to_uint32(stats.st_size),
        sha=sha,
        path=path,
    )
