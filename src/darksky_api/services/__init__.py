"""
Shared utilities.

- http.py - ``requests`` session with default timeout and no retry
"""
