"""Bundled word set documents."""
