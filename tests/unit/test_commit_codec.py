# Unit tests for utils/commit.py

import pytest
import os
import re
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'nbgit-project'))

from utils import objects
from utils import commit as commit_utils

TREE = 'a' * 40
PARENT = 'b' * 40


class TestRenderCommit:
    """Tests for commit_utils.render_commit()"""

    def test_root_commit_has_no_parent_line(self):
        text = commit_utils.render_commit(TREE, None, 'first', 'Ann', 'ann@example.com', 1700000000, '+0000')

        assert text == (
            f"tree {TREE}\n"
            "author Ann <ann@example.com> 1700000000 +0000\n"
            "committer Ann <ann@example.com> 1700000000 +0000\n"
            "\n"
            "first\n"
        )

    def test_parent_line(self):
        text = commit_utils.render_commit(TREE, PARENT, 'second', 'Ann', 'ann@example.com', 1700000000, '-0500')

        assert text.splitlines()[1] == f"parent {PARENT}"


class TestParseCommit:
    """Tests for commit_utils.parse_commit()"""

    def test_round_trip(self):
        text = commit_utils.render_commit(TREE, PARENT, 'line one\n\nline three', 'Ann Lee', 'ann@example.com',
                                          1700000000, '+0900')

        parsed = commit_utils.parse_commit(text.encode('utf-8'))

        assert parsed.tree == TREE
        assert parsed.parent == PARENT
        assert parsed.author == commit_utils.Author('Ann Lee', 'ann@example.com', 1700000000, '+0900')
        assert parsed.message == 'line one\n\nline three'

    def test_without_parent(self):
        parsed = commit_utils.parse_commit(commit_utils.render_commit(TREE, None, 'm', 'a', 'b', 1, '+0000'))
        assert parsed.parent is None

    def test_malformed_author_is_none(self):
        parsed = commit_utils.parse_commit(f"tree {TREE}\nauthor nobody\n\nmsg\n")

        assert parsed.author is None
        assert parsed.message == 'msg'

    def test_empty_identity(self):
        """Commits written without a configured author still parse."""
        parsed = commit_utils.parse_commit(commit_utils.render_commit(TREE, None, 'm', '', '', 5, '+0000'))
        assert parsed.author == commit_utils.Author('', '', 5, '+0000')


class TestFormatLogDate:
    """Tests for commit_utils.format_log_date()"""

    def test_utc(self):
        assert commit_utils.format_log_date(0, '+0000') == 'Thu Jan 01 00:00:00 1970 +0000'

    def test_uses_commit_offset(self):
        assert commit_utils.format_log_date(1792292400, '+0900') == 'Sun Oct 18 12:00:00 2026 +0900'

    def test_negative_offset(self):
        assert commit_utils.format_log_date(0, '-0130') == 'Wed Dec 31 22:30:00 1969 -0130'


class TestLocalTimezone:
    """Tests for commit_utils.local_timezone()"""

    def test_format(self):
        assert re.fullmatch(r'[+-]\d{4}', commit_utils.local_timezone())


class TestBuildCommit:
    """Tests for commit_utils.build_commit() and commit_utils.read_commit()"""

    def test_build_and_read(self, temp_repo):
        sha = commit_utils.build_commit(temp_repo, TREE, None, 'hello', 'Ann', 'ann@example.com')

        parsed = commit_utils.read_commit(temp_repo, sha)

        assert parsed.tree == TREE
        assert parsed.message == 'hello'
        assert parsed.author.name == 'Ann'

    def test_read_commit_rejects_blob(self, temp_repo):
        blob = objects.hash_object(temp_repo, b'data', 'blob')

        with pytest.raises(TypeError):
            commit_utils.read_commit(temp_repo, blob)

    def test_commit_files_of_none(self, temp_repo):
        assert commit_utils.get_commit_files(temp_repo, None) == {}

    def test_commit_files(self, repo_with_commit):
        repo, commit_hash = repo_with_commit

        files = commit_utils.get_commit_files(repo, commit_hash)

        assert list(files) == ['README.md']
        assert files['README.md'].mode == '100644'
