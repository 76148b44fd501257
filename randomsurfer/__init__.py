"""Random-surfer page ranking over a randomly generated link graph, with CSV export and a window."""

__version__ = "0.1.0"
__all__ = ["matrix", "surfer", "csv_export", "gui"]