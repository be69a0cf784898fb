"""mcli: object-storage command-line client.

Submodules:
    cli       - click command tree (``mcli config host ...``)
    config    - config document models and the JSON config store
    hosts     - host alias add/remove/list operations
    utils     - validators, file helpers, logging setup
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mcli")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"

del version, PackageNotFoundError
