"""
Personal-finance tracker core: operations, monthly summaries and the use
cases that manage them.
"""

__version__ = "0.1.0"
