import os
from importlib.metadata import version, PackageNotFoundError

# Checkout root, one level above this package
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_live_version(root_path=PACKAGE_ROOT):
    """Calculates version live from Git when running from source."""
    try:
        from setuptools_scm import get_version
        return get_version(root=root_path)
    except (ModuleNotFoundError, LookupError):
        # setuptools_scm missing or not inside a Git checkout
        return "0.0.0+no-scm"

try:
    # Installed package metadata first
    __version__ = version("gtfs2openapi")
except PackageNotFoundError:
    __version__ = get_live_version()
