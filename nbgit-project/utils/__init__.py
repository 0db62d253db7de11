# This file makes the 'utils' directory a Python package
# Low-level building blocks shared by the commands: object store, index, trees, commits, diffs and refs
