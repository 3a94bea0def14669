"""linewrap — wrap text to a fixed display width.

Reads inline text, files, or standard input and streams each chunk,
wrapped independently, to standard output or a file.
"""

from linewrap.version import __version__

__all__: list[str] = ["__version__"]
