"""
kv: Command-Line Key-Value Store

A small key-value store for the shell. Pairs are kept as key:value lines
in a single plain-text file.
"""

__version__ = "1.0.0"
