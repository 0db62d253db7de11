# What it does: Holds every user-facing string nbgit prints, so commands and errors format text the same way
# How it does: Plain constants for fixed text and small functions for text that takes arguments

NAME_SYSTEM = 'nbgit'
NAME_SYSTEM_CAPITALIZED = NAME_SYSTEM[0].upper() + NAME_SYSTEM[1:]


def not_a_repository(dir_name):
    return f"fatal: not a {NAME_SYSTEM} repository (or any of the parent directories): {dir_name}"

MISSING_BRANCH_OR_COMMIT_ARGUMENT = "fatal: missing branch or commit argument"
BRANCH_NAME_REQUIRED = "fatal: branch name required"
BRANCH_HEAD_IS_BROKEN = "fatal: branch HEAD is broken"
NOTHING_SPECIFIED_NOTHING_ADDED = "fatal: nothing specified, nothing added."
USAGE_INIT = f"usage: {NAME_SYSTEM} init"
EMPTY_COMMIT_MESSAGE = "Aborting commit due to empty commit message."

def initialized_repository(path_full, exist):
    prefix = "Reinitialized existing" if exist else "Initialized empty"
    return f"{prefix} {NAME_SYSTEM_CAPITALIZED} repository in {path_full}"

def not_supported_command(cmd):
    return f"fatal: '{cmd}' is not a supported command"

def pathspec_not_match(path):
    return f"fatal: pathspec '{path}' did not match any files"

def does_not_have_any_commits(branch):
    return f"fatal: your current branch '{branch}' does not have any commits yet"

def on_branch(branch):
    return f"On branch {branch}"

def new_file(path):
    return f"\tnew file:   {path}"

def modified_file(path):
    return f"\tmodified:   {path}"

def deleted_file(path):
    return f"\tdeleted:    {path}"

def nothing_to_commit(branch, is_root):
    if is_root:
        return (f"{on_branch(branch)}\n\nInitial commit\n\n"
                f"nothing to commit (create/copy files and use \"add\" to track)")
    return f"{on_branch(branch)}\nnothing to commit, working tree clean"

CHANGES_TO_BE_COMMITTED = (
    "\nChanges to be committed:\n"
    f"  (use \"{NAME_SYSTEM} restore --staged <file>...\" to unstage)\n"
)
CHANGES_NOT_STAGED_FOR_COMMIT = (
    "\nChanges not staged for commit:\n"
    f"  (use \"{NAME_SYSTEM} add <file>...\" to update what will be committed)\n"
    f"  (use \"{NAME_SYSTEM} restore <file>...\" to discard changes in working directory)\n"
)
UNTRACKED_FILES = (
    "\nUntracked files:\n"
    f"  (use \"{NAME_SYSTEM} add <file>...\" to include in what will be committed)\n"
)

def not_valid_object_name(name):
    return f"fatal: Not a valid object name: '{name}'."

def branch_already_exists(name):
    return f"fatal: A branch named '{name}' already exists."

def branch_not_found(name):
    return f"error: branch '{name}' not found"

def invalid_branch_name(name):
    return f"fatal: '{name}' is not a valid branch name"

def untracked_file_would_be_overwritten(path):
    return ("error: The following untracked working tree files would be overwritten by switch:\n"
            f"\t{path}\n"
            "Please move or remove them before you switch branches.")

def cannot_delete_checked_out_branch(name, root):
    return f"error: Cannot delete branch '{name}' checked out at '{root}'."

def switched_to_branch(name):
    return f"Switched to branch '{name}'"

def deleted_branch(name):
    return f"Deleted branch '{name}'"

def created_branch(name, hash_short):
    return f"Branch '{name}' created at {hash_short}..."

def cloning_into(path):
    return f"Cloning into '{path}'..."

def repository_not_found(path):
    return f"fatal: repository '{path}' not found"

def object_not_found(sha):
    return f"fatal: object not found: {sha}"

def config_set(key, value):
    return f"Set {key} to '{value}'"

def invalid_config_key(key):
    return f"error: key does not contain a section: {key}"


def plural(count, word):
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
