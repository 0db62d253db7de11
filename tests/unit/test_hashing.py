# Unit tests for utils/hashing.py

import hashlib
import os
import re
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'nbgit-project'))

from utils import hashing


class TestGetHashModule:
    """Tests for hashing.get_hash_module()"""

    def test_default_is_sha1(self):
        module = hashing.get_hash_module()
        assert module.name == 'sha1'
        assert module.digest_length == 20
        assert module.hex_length == 40

    def test_sha1_matches_hashlib(self):
        module = hashing.get_hash_module('sha1')
        assert module.hex(b'test') == hashlib.sha1(b'test').hexdigest()
        assert module.raw(b'test') == hashlib.sha1(b'test').digest()

    def test_sha256_lengths(self):
        module = hashing.get_hash_module('sha256')
        assert module.digest_length == 32
        assert module.hex_length == 64
        assert len(module.raw(b'test')) == 32
        assert module.raw(b'test').hex() == module.hex(b'test')

    def test_custom_keeps_fixed_length(self):
        module = hashing.get_hash_module('custom')
        digest = module.hex(b'test')
        assert re.fullmatch(r'[0-9a-f]{%d}' % module.hex_length, digest)
        assert len(module.raw(b'')) == module.digest_length
        assert digest != hashlib.sha1(b'test').hexdigest()

    def test_unknown_name_falls_back_to_sha1(self):
        assert hashing.get_hash_module('md5').name == 'sha1'


class TestIsValidHex:
    """Tests for HashModule.is_valid_hex()"""

    @pytest.mark.parametrize('value, expected', [
        ('a' * 40, True),
        ('A' * 40, True),
        ('a' * 39, False),
        ('g' * 40, False),
        ('', False),
        (None, False),
    ])
    def test_sha1_hex_validation(self, value, expected):
        assert hashing.get_hash_module('sha1').is_valid_hex(value) is expected

    def test_sha256_rejects_sha1_length(self):
        assert not hashing.get_hash_module('sha256').is_valid_hex('a' * 40)
