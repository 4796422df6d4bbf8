"""
Config store client package.

Syncs the server list with a GitHub Gist and applies it to local
application configs through the config writer.
"""

from .downloads import download_config, download_filenames, download_for_target
from .gist_store import GistStore, LoadedDocument
from .local_writer import LocalWriterClient
from .store import ApplyOutcome, ConfigStore

__all__ = [
    "ConfigStore",
    "ApplyOutcome",
    "GistStore",
    "LoadedDocument",
    "LocalWriterClient",
    "download_config",
    "download_filenames",
    "download_for_target",
]
