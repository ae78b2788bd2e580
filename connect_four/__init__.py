"""
connect_four - Two-player Connect Four board engine

This package provides the Connect Four board engine (placement rule and
win/tie detection), a game session that alternates turns, a gymnasium
environment adapter, and a small console interface for playing locally.
"""

# Version number
__version__ = '0.1.0'
