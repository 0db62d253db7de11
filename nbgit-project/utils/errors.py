# What it does: Defines the error kinds every nbgit operation can raise
# How it does: One exception class per kind, all deriving from NbgitError. The data a caller may branch on (path, branch name, hash)
# is kept as attributes; the printable text comes from utils/messages.py
# What data structure it uses: A small class hierarchy

from . import messages


class NbgitError(Exception):
    """Base class for every condition nbgit reports to the user."""


class NotARepository(NbgitError):
    def __init__(self, dir_name):
        self.dir_name = dir_name
        super().__init__(messages.not_a_repository(dir_name))


class UsageError(NbgitError):
    pass


class NothingSpecifiedNothingAdded(NbgitError):
    def __init__(self):
        super().__init__(messages.NOTHING_SPECIFIED_NOTHING_ADDED)


class PathspecMismatch(NbgitError):
    def __init__(self, path):
        self.path = path
        super().__init__(messages.pathspec_not_match(path))


class NotSupportedCommand(NbgitError):
    def __init__(self, cmd):
        self.cmd = cmd
        super().__init__(messages.not_supported_command(cmd))


class NothingToCommit(NbgitError):
    def __init__(self, branch, is_root):
        self.branch = branch
        self.is_root = is_root
        super().__init__(messages.nothing_to_commit(branch, is_root))


class NoCommitsYet(NbgitError):
    def __init__(self, branch):
        self.branch = branch
        super().__init__(messages.does_not_have_any_commits(branch))


class NotValidObjectName(NbgitError):
    def __init__(self, name):
        self.name = name
        super().__init__(messages.not_valid_object_name(name))


class BranchAlreadyExists(NbgitError):
    def __init__(self, name):
        self.name = name
        super().__init__(messages.branch_already_exists(name))


class CannotDeleteCheckedOutBranch(NbgitError):
    def __init__(self, name, root):
        self.name = name
        self.root = root
        super().__init__(messages.cannot_delete_checked_out_branch(name, root))


class BranchNameRequired(NbgitError):
    def __init__(self):
        super().__init__(messages.BRANCH_NAME_REQUIRED)


class BranchNotFound(NbgitError):
    def __init__(self, name):
        self.name = name
        super().__init__(messages.branch_not_found(name))


class BrokenBranchHead(NbgitError):
    def __init__(self, name=None):
        self.name = name
        super().__init__(messages.BRANCH_HEAD_IS_BROKEN)


class RepositoryNotFound(NbgitError):
    def __init__(self, path):
        self.path = path
        super().__init__(messages.repository_not_found(path))


class ObjectNotFound(NbgitError):
    def __init__(self, sha):
        self.sha = sha
        super().__init__(messages.object_not_found(sha))


class InvalidBranchName(NbgitError):
    def __init__(self, name):
        self.name = name
        super().__init__(messages.invalid_branch_name(name))


class UntrackedFileInTheWay(NbgitError):
    def __init__(self, path):
        self.path = path
        super().__init__(messages.untracked_file_would_be_overwritten(path))
