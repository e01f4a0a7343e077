"""structural - enforce which sibling packages a Python package may import from."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("structural")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__"]
