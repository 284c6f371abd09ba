"""Format lists of values as SQL value lists and chunked IN clauses, with a text editor buffer, snippet store and command line tool."""

__version__ = "0.1.0"