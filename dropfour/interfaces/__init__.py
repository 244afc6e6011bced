"""
dropfour.interfaces - User interfaces for dropfour

This package contains the command-line interface for playing and
inspecting games.
"""

# Don't import anything here to avoid circular imports
__all__ = []
