# What it does: Resolves nbgit's configuration (hash algorithm, author identity, metadata directory name) and manages the
# repository's own `config` file
# How it does: `load_config` layers explicit overrides over NBGIT_* environment variables over built-in defaults. The per-repository
# `config` file is INI, read and written with `configparser`, and supplies the author identity when nothing else does
# What data structure it uses: Named tuple for the resolved settings, Map / Dictionary (the INI sections managed by `configparser`)

import configparser
import io
import os
from collections import namedtuple

RepoConfig = namedtuple('RepoConfig', [
    'hash_algorithm',
    'author_name',
    'author_email',
    'repository_dir_name',
    'default_branch',
])

DEFAULTS = RepoConfig(
    hash_algorithm='sha1',
    author_name='',
    author_email='',
    repository_dir_name='.nbgit',
    default_branch='main',
)

ENVIRONMENT_KEYS = {
    'hash_algorithm': 'NBGIT_HASH_ALGORITHM',
    'author_name': 'NBGIT_AUTHOR_NAME',
    'author_email': 'NBGIT_AUTHOR_EMAIL',
    'repository_dir_name': 'NBGIT_DIR',
    'default_branch': 'NBGIT_DEFAULT_BRANCH',
}


def load_config(overrides=None, environ=None): # Builds a RepoConfig from overrides, then the environment, then the defaults
    if environ is None:
        environ = os.environ
    overrides = overrides or {}

    unknown = set(overrides) - set(RepoConfig._fields)
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")

    values = {}
    for field in RepoConfig._fields:
        if overrides.get(field) is not None:
            values[field] = overrides[field]
        elif environ.get(ENVIRONMENT_KEYS[field]):
            values[field] = environ[ENVIRONMENT_KEYS[field]]
        else:
            values[field] = getattr(DEFAULTS, field)
    return RepoConfig(**values)


def get_config_path(repo):  # Returns the path to the config file within the repository
    return repo.path('config')

def read_config(repo): # Reads and returns the repository configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo)
    if repo.fs.exists(config_path):
        config.read_string(repo.fs.read_bytes(config_path).decode('utf-8'))
    return config

def write_config(repo, key, value): # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"Invalid key format '{key}'. Should be 'section.key'.")

    config = read_config(repo)
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    buffer = io.StringIO()
    config.write(buffer)
    repo.fs.write_bytes(get_config_path(repo), buffer.getvalue().encode('utf-8'))

def get_user_config(repo): # Retrieves user.name and user.email from the config file, or None if not set
    config = read_config(repo)
    user_name = config.get('user', 'name', fallback=None)
    user_email = config.get('user', 'email', fallback=None)
    return user_name, user_email

def get_author(repo): # Author identity for new commits: injected configuration first, repository config file second
    name, email = repo.config.author_name, repo.config.author_email
    if name and email:
        return name, email
    file_name, file_email = get_user_config(repo)
    return name or file_name or '', email or file_email or ''
