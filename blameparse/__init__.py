"""Parse git blame porcelain output into commit and line tables."""

__version__ = '0.1'
