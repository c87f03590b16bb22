"""Console display helpers."""

from mathmenu.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
