"""
GitContrib - per-author contribution statistics for Git repositories

This package parses the history of a Git repository into per-author
totals of added and deleted lines, commit counts, and a ranking by
net contribution.
"""

__version__ = '0.1.0'
