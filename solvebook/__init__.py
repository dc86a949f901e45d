"""Solutions to classic programming-contest problems as plain functions."""

__version__ = "0.1.0"
__all__ = ["misc", "cses", "codeforces_numbers", "codeforces_strings", "leetcode"]