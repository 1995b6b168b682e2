"""
Utility modules for worktools.

- patterns: Compiled regular expressions for the time log line shapes
"""
