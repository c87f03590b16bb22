"""mathmenu: an interactive console with three numeric utilities."""

__version__ = "0.1.0"
