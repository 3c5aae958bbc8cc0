"""
scriptlex Command-Line Interface
================================

- **sclex**: print the token stream of a source file or string

Implemented as a Click application.
"""

__all__ = ["sclex"]
