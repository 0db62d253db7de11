# The command: nbgit config <key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., user.name) in the repository's config file
# How it does: It acts as a simple dispatcher, passing the key and value to the `write_config` function in the `utils/config.py` module,
# which handles the file I/O and parsing logic
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by
# `utils/config.py`

from utils import messages, repository
from utils import config as config_utils
from utils.errors import UsageError


def set_config(repo, key, value):
    repo.require()
    try: # Set the configuration key-value pair
        config_utils.write_config(repo, key, value)
    except ValueError:
        raise UsageError(messages.invalid_config_key(key)) from None
    return messages.config_set(key, value)

def run(args):
    repo = repository.open_repository()
    print(set_config(repo, args.key, args.value))
