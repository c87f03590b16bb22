"""Numeric feature packages."""
