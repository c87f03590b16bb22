"""Configuration package for mathmenu."""
