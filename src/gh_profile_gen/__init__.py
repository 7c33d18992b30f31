"""
gh-profile-gen - GitHub profile README wizard

An interactive terminal wizard that collects profile data step by step
and hands a finished configuration record to the README renderer.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gh-profile-gen")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
]
