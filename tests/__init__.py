"""
Tests package for box_style_lib.

This package contains unit tests for all library components.
Tests use in-memory stores and mock collaborators to stay independent
of any host editor.

Run all tests:
    python -m pytest tests/ -v
"""
