"""CLI layer: type inspection commands and the error boundary.

This package is the outermost layer.  It may import from ``core``, but
``core`` never imports from ``cli``.
"""
