# What it does: Selects the digest algorithm every object, index and ref is keyed by
# How it does: Wraps a `hashlib` constructor in a HashModule exposing hex and raw digests together with their fixed lengths, so
# callers never hard-code 20 bytes / 40 hex characters
# What data structure it uses: Dictionary (algorithm name -> hashlib constructor)

import hashlib
import logging

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = 'sha1'


def _custom(data=b''):
    # Fixed 20-byte digest, same lengths as sha1
    return hashlib.blake2b(data, digest_size=20)

ALGORITHMS = {
    'sha1': hashlib.sha1,
    'sha256': hashlib.sha256,
    'custom': _custom,
}


class HashModule:
    def __init__(self, name, constructor):
        self.name = name
        self._constructor = constructor
        self.digest_length = constructor().digest_size
        self.hex_length = self.digest_length * 2

    def hex(self, data):
        return self._constructor(data).hexdigest()

    def raw(self, data):
        return self._constructor(data).digest()

    def is_valid_hex(self, value): # True if value looks like a full-length hex digest of this algorithm
        if not value or len(value) != self.hex_length:
            return False
        try:
            int(value, 16)
        except ValueError:
            return False
        return True

    def __repr__(self):
        return f"HashModule({self.name!r}, digest_length={self.digest_length})"


def get_hash_module(name=None): # Returns the HashModule for `name`, falling back to sha1 for unknown names
    if name not in ALGORITHMS:
        if name:
            logger.debug("unknown hash algorithm %r, using %s", name, DEFAULT_ALGORITHM)
        name = DEFAULT_ALGORITHM
    return HashModule(name, ALGORITHMS[name])
