"""Adapters — bindings to git and the filesystem.

Public re-exports for convenient access.
"""

from build_version.adapters.vcs.git import Describer, GitDescriber, git_describe

__all__ = [
    "Describer",
    "GitDescriber",
    "git_describe",
]
