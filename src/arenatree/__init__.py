"""Arena-indexed tree containers.

This package provides a generic tree whose nodes live in a single append-only
arena and are addressed by stable integer ids, with support for chained
construction, predicate search and root-to-node branch matching.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("arenatree")
except PackageNotFoundError:
    __version__ = "unknown"
