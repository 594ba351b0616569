"""CLI layer — argument parsing, user output, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra`` and ``backends``; only ``backends`` may import
from ``cli`` in return (for console output).
"""
