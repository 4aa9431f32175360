"""
Test suite for the replay engine.

Focus areas:
- Cell encoding and board bounds
- Turn parsing and application
- Score tracking
- Replay invariants and determinism
- Document validation and the CLI
"""
