# dead_links/__init__.py
"""
dead_links package initializer.
Defines the package version; the command line lives in dead_links.cli.
"""
__version__ = "0.1.0"

__all__ = ["__version__"]
