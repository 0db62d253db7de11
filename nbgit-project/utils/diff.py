# What it does: Provides helper functions for comparing repository states, counting changed lines and detecting renames
# How it does: Line diffs come from `difflib.SequenceMatcher` opcodes. Rename detection is greedy: an exact pass pairing identical
# content, then a best-similarity pass for what is left
# What data structure it uses: Dictionary (for states), Set (for path comparisons and claimed candidates), List (of file lines
# for the diffing algorithm)

import difflib
from collections import namedtuple

RENAME_THRESHOLD = 90

FileState = namedtuple('FileState', ['path', 'mode', 'sha', 'text'])
Rename = namedtuple('Rename', ['old_path', 'new_path', 'similarity'])


def compare_states(state1, state2): # Compares two states represented as {path: hash} dictionaries

    paths1 = set(state1.keys())
    paths2 = set(state2.keys())

    added = sorted(list(paths2 - paths1))
    deleted = sorted(list(paths1 - paths2))

    modified = []
    for path in sorted(list(paths1 & paths2)):
        if state1[path] != state2[path]:
            modified.append(path)

    return {'added': added, 'deleted': deleted, 'modified': modified}

def split_lines(text): # Splits on "\n" keeping the terminators; a final line without one is still a line
    lines = text.split('\n')
    result = [line + '\n' for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result

def count_lines(text):
    return len(split_lines(text))

def _opcodes(text_a, text_b):
    lines_a, lines_b = split_lines(text_a), split_lines(text_b)
    matcher = difflib.SequenceMatcher(None, lines_a, lines_b, autojunk=False)
    return lines_a, lines_b, matcher.get_opcodes()

def line_diff_counts(text_a, text_b): # Returns (insertions, deletions) summed over every changed run
    _, _, opcodes = _opcodes(text_a, text_b)
    insertions = deletions = 0
    for tag, i1, i2, j1, j2 in opcodes:
        if tag == 'equal':
            continue
        deletions += i2 - i1
        insertions += j2 - j1
    return insertions, deletions

def similarity(text_a, text_b):
    """
    Percentage (0..100) of unchanged text, measured in characters across both sides of the diff.
    Two empty texts are identical (100); exactly one empty text shares nothing (0).
    """
    if not text_a and not text_b:
        return 100
    if not text_a or not text_b:
        return 0

    lines_a, lines_b, opcodes = _opcodes(text_a, text_b)
    same = total = 0
    for tag, i1, i2, j1, j2 in opcodes:
        removed = sum(len(line) for line in lines_a[i1:i2])
        if tag == 'equal':
            same += removed
            total += removed
        else:
            total += removed + sum(len(line) for line in lines_b[j1:j2])

    if total == 0:
        return 100
    return int(same * 100 / total + 0.5)

def detect_renames(deleted, created, threshold=RENAME_THRESHOLD):
    """
    Pairs deleted files with created files.

    First pass: each deleted file (in order) claims the first unclaimed created file with the same hash and mode, at 100%.
    Second pass: each remaining deleted file takes the most similar unclaimed created file with the same mode, if that score
    reaches the threshold. Earlier candidates win ties.

    Returns (renames, deleted_remaining, created_remaining).
    """
    renames = []
    claimed_deleted = set()
    claimed_created = set()

    for i, old in enumerate(deleted):
        for j, new in enumerate(created):
            if j in claimed_created:
                continue
            if old.sha == new.sha and old.mode == new.mode:
                renames.append(Rename(old.path, new.path, 100))
                claimed_deleted.add(i)
                claimed_created.add(j)
                break

    for i, old in enumerate(deleted):
        if i in claimed_deleted:
            continue

        best_score, best_index = 0, -1
        for j, new in enumerate(created):
            if j in claimed_created or old.mode != new.mode:
                continue
            score = similarity(old.text, new.text)
            if score > best_score:
                best_score, best_index = score, j

        if best_index != -1 and best_score >= threshold:
            renames.append(Rename(old.path, created[best_index].path, best_score))
            claimed_deleted.add(i)
            claimed_created.add(best_index)

    deleted_remaining = [f for i, f in enumerate(deleted) if i not in claimed_deleted]
    created_remaining = [f for j, f in enumerate(created) if j not in claimed_created]
    return renames, deleted_remaining, created_remaining
