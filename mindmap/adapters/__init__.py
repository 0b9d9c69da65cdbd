"""Adapter package for concrete port implementations.

Purpose:
    Collect the in-memory user store, the session holder and the JSON
    settings file used by the desktop app and by tests.

Call context:
    Imported by ``mindmap.app.composition`` for runtime wiring and by tests
    as ready-made collaborators.
"""
