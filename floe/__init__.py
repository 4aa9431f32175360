"""
Floe Replay Engine

Deterministic reconstruction of board and score history from penguin/fish grid game logs.
"""

__version__ = "0.1.0"
