# Unit tests for utils/diff.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'nbgit-project'))

from utils import diff as diff_utils

FileState = diff_utils.FileState


class TestCompareStates:
    """Tests for diff_utils.compare_states()"""

    def test_buckets(self):
        old = {'a': '1', 'b': '2', 'c': '3'}
        new = {'b': '2', 'c': '4', 'd': '5'}

        assert diff_utils.compare_states(old, new) == {'added': ['d'], 'deleted': ['a'], 'modified': ['c']}


class TestLineCounts:
    """Tests for diff_utils.count_lines() and diff_utils.line_diff_counts()"""

    @pytest.mark.parametrize('text, expected', [
        ('', 0),
        ('x', 1),
        ('x\n', 1),
        ('x\ny', 2),
        ('x\ny\n', 2),
        ('\n\n', 2),
    ])
    def test_count_lines(self, text, expected):
        assert diff_utils.count_lines(text) == expected

    def test_identical(self):
        assert diff_utils.line_diff_counts('a\nb\n', 'a\nb\n') == (0, 0)

    def test_replaced_line(self):
        assert diff_utils.line_diff_counts('a\nb\nc\n', 'a\nB\nc\n') == (1, 1)

    def test_appended_lines(self):
        assert diff_utils.line_diff_counts('a\n', 'a\nb\nc\n') == (2, 0)

    def test_missing_final_newline_is_a_change(self):
        assert diff_utils.line_diff_counts('a\nb', 'a\nb\n') == (1, 1)


class TestSimilarity:
    """Tests for diff_utils.similarity()"""

    def test_both_empty(self):
        assert diff_utils.similarity('', '') == 100

    def test_one_empty(self):
        assert diff_utils.similarity('', 'x\n') == 0
        assert diff_utils.similarity('x\n', '') == 0

    def test_identical(self):
        assert diff_utils.similarity('a\nb\n', 'a\nb\n') == 100

    def test_nothing_shared(self):
        assert diff_utils.similarity('a\n', 'b\n') == 0

    def test_partial(self):
        # 4 unchanged chars out of 4 + 2 + 2
        assert diff_utils.similarity('aaa\nb\n', 'aaa\nc\n') == 50

    def test_rounds_half_up(self):
        # 3 unchanged chars out of 3 + 1 + 4 -> 37.5
        assert diff_utils.similarity('ab\nc', 'ab\ndefg') == 38


class TestDetectRenames:
    """Tests for diff_utils.detect_renames()"""

    def test_exact_rename(self):
        deleted = [FileState('old.txt', '100644', 'h1', 'same\n')]
        created = [FileState('new.txt', '100644', 'h1', 'same\n')]

        renames, deleted_left, created_left = diff_utils.detect_renames(deleted, created)

        assert renames == [diff_utils.Rename('old.txt', 'new.txt', 100)]
        assert deleted_left == []
        assert created_left == []

    def test_mode_must_match(self):
        deleted = [FileState('old.sh', '100644', 'h1', 'same\n')]
        created = [FileState('new.sh', '100755', 'h1', 'same\n')]

        renames, deleted_left, created_left = diff_utils.detect_renames(deleted, created)

        assert renames == []
        assert deleted_left == deleted
        assert created_left == created

    def test_exact_pass_takes_first_candidate(self):
        deleted = [FileState('a', '100644', 'h', 'x\n'), FileState('b', '100644', 'h', 'x\n')]
        created = [FileState('c', '100644', 'h', 'x\n'), FileState('d', '100644', 'h', 'x\n')]

        renames, _, _ = diff_utils.detect_renames(deleted, created)

        assert [(r.old_path, r.new_path) for r in renames] == [('a', 'c'), ('b', 'd')]

    def test_similar_content_above_threshold(self):
        old_text = ''.join(f"line {i}\n" for i in range(40))
        new_text = old_text + 'one more\n'
        deleted = [FileState('old.txt', '100644', 'h1', old_text)]
        created = [FileState('new.txt', '100644', 'h2', new_text)]

        renames, _, _ = diff_utils.detect_renames(deleted, created)

        assert len(renames) == 1
        assert 90 <= renames[0].similarity < 100

    def test_below_threshold_is_not_a_rename(self):
        deleted = [FileState('old.txt', '100644', 'h1', 'aaa\nb\n')]
        created = [FileState('new.txt', '100644', 'h2', 'aaa\nc\n')]

        renames, deleted_left, created_left = diff_utils.detect_renames(deleted, created)

        assert renames == []
        assert len(deleted_left) == 1 and len(created_left) == 1

    def test_custom_threshold(self):
        deleted = [FileState('old.txt', '100644', 'h1', 'aaa\nb\n')]
        created = [FileState('new.txt', '100644', 'h2', 'aaa\nc\n')]

        renames, _, _ = diff_utils.detect_renames(deleted, created, threshold=50)

        assert renames == [diff_utils.Rename('old.txt', 'new.txt', 50)]

    def test_similarity_tie_goes_to_first_candidate(self):
        # Both candidates score 50
        deleted = [FileState('old.txt', '100644', 'h1', 'aaa\nb\n')]
        created = [FileState('first.txt', '100644', 'h2', 'aaa\nc\n'), FileState('second.txt', '100644', 'h3', 'aaa\nd\n')]

        renames, _, created_left = diff_utils.detect_renames(deleted, created, threshold=50)

        assert renames == [diff_utils.Rename('old.txt', 'first.txt', 50)]
        assert [f.path for f in created_left] == ['second.txt']

    def test_earlier_deleted_file_claims_candidate(self):
        deleted = [FileState('one.txt', '100644', 'h1', 'aaa\nb\n'), FileState('two.txt', '100644', 'h2', 'aaa\nb\n')]
        created = [FileState('new.txt', '100644', 'h3', 'aaa\nc\n')]

        renames, deleted_left, created_left = diff_utils.detect_renames(deleted, created, threshold=50)

        assert renames == [diff_utils.Rename('one.txt', 'new.txt', 50)]
        assert [f.path for f in deleted_left] == ['two.txt']
        assert created_left == []

    def test_exact_match_is_taken_before_similar_ones(self):
        deleted = [FileState('similar.txt', '100644', 'h1', 'aaa\nb\n'), FileState('exact.txt', '100644', 'h2', 'aaa\nc\n')]
        created = [FileState('new.txt', '100644', 'h2', 'aaa\nc\n')]

        renames, deleted_left, _ = diff_utils.detect_renames(deleted, created, threshold=50)

        assert renames == [diff_utils.Rename('exact.txt', 'new.txt', 100)]
        assert [f.path for f in deleted_left] == ['similar.txt']
