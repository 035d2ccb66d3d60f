"""CLI layer — process boundary: console output, exit codes, error policies.

This package is the outermost layer.  It may import from ``core``, but
``core`` never imports from ``cli``.
"""
