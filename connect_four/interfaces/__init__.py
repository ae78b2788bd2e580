"""
connect_four.interfaces - Terminal interface for Connect Four

Console rendering (printer) and the interactive turn loop (cli).
"""

# Don't import anything here to avoid circular imports
__all__ = []
