"""
Current cloudimg version constant plus version pretty-print method.
"""

VERSION = (0, 1, 0)


def get_version() -> str:
    """Return version string, e.g. "0.1.0" """
    return ".".join(str(part) for part in VERSION)


__version__ = get_version()
