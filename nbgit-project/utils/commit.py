# What it does: Builds, parses and reads commit objects
# How it does: A commit is text: tree, optional parent, author and committer lines, a blank line, then the message. It is written
# through the object store with the wall-clock time and the local UTC offset at the moment of the call
# What data structure it uses: Named tuples (Commit, Author), forming a linked list of commits through their parent hashes

import logging
import re
import time
from collections import namedtuple
from datetime import datetime, timedelta, timezone

from . import objects, tree as tree_utils

logger = logging.getLogger(__name__)

Commit = namedtuple('Commit', ['tree', 'parent', 'author', 'message'])
Author = namedtuple('Author', ['name', 'email', 'timestamp', 'tz_offset'])

AUTHOR_PATTERN = re.compile(r'^(.*) <(.*)> (\d+) ([+-]\d{4})$')

WEEKDAYS = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def local_timezone(timestamp=None): # Local UTC offset formatted as +HHMM / -HHMM
    offset = time.localtime(timestamp).tm_gmtoff // 60
    sign = '+' if offset >= 0 else '-'
    offset = abs(offset)
    return f"{sign}{offset // 60:02d}{offset % 60:02d}"

def render_commit(tree, parent, message, author_name, author_email, timestamp, tz_offset):
    identity = f"{author_name} <{author_email}> {timestamp} {tz_offset}"
    lines = [f'tree {tree}']
    if parent:
        lines.append(f'parent {parent}')
    lines.append(f'author {identity}')
    lines.append(f'committer {identity}')
    return '\n'.join(lines) + f'\n\n{message}\n'

def build_commit(repo, tree, parent, message, author_name, author_email): # Creates a commit object and returns its hash
    timestamp = int(time.time())
    text = render_commit(tree, parent, message, author_name, author_email, timestamp, local_timezone(timestamp))
    sha = objects.hash_object(repo, text.encode('utf-8'), 'commit')
    logger.debug("commit %s (tree %s, parent %s)", sha, tree, parent)
    return sha

def parse_author(value):
    matched = AUTHOR_PATTERN.match(value)
    if not matched:
        return None
    name, email, timestamp, tz_offset = matched.groups()
    return Author(name, email, int(timestamp), tz_offset)

def parse_commit(body):
    if isinstance(body, bytes):
        body = body.decode('utf-8')

    headers, _, message = body.partition('\n\n')
    if message.endswith('\n'):
        message = message[:-1]

    tree, parent, author = '', None, None
    for line in headers.split('\n'):
        if line.startswith('tree '):
            tree = line[5:].strip()
        elif line.startswith('parent '):
            parent = line[7:].strip()
        elif line.startswith('author '):
            author = parse_author(line[7:])

    return Commit(tree, parent, author, message)

def read_commit(repo, sha):
    obj_type, content = objects.read_object(repo, sha)
    if obj_type != 'commit':
        raise TypeError(f"Object {sha} is not a commit")
    return parse_commit(content)

def format_log_date(timestamp, tz_offset): # e.g. "Sun Oct 18 12:00:00 2026 +0900", shown in the commit's own offset
    sign = -1 if tz_offset.startswith('-') else 1
    minutes = sign * (int(tz_offset[1:3]) * 60 + int(tz_offset[3:5]))
    moment = datetime.fromtimestamp(timestamp, timezone(timedelta(minutes=minutes)))
    # Locale independent names
    weekday = WEEKDAYS[moment.weekday()]
    month = MONTHS[moment.month - 1]
    return f"{weekday} {month} {moment.day:02d} {moment:%H:%M:%S} {moment.year} {tz_offset}"

def get_commit_tree_hash(repo, commit_hash): # Retrieves the tree hash from a commit object
    if not commit_hash:
        return None
    return read_commit(repo, commit_hash).tree or None

def get_commit_files(repo, commit_hash): # Retrieves {path: TreeEntry} for every file recorded in a commit
    tree_hash = get_commit_tree_hash(repo, commit_hash)
    if not tree_hash:
        return {}
    return tree_utils.read_tree(repo, tree_hash)
