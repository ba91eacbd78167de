"""
spacetab Command-Line Interface
===============================

- **spacetab**: run a program from standard input or a file

Implemented as a Click application with consistent error reporting
(see cli.errors).
"""

__all__ = ["spacetab"]
