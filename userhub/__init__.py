"""Unified user directory built from heterogeneous user sources."""
