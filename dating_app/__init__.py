"""
Top‑level package for the dating app demo.

This file makes ``dating_app`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``dating_app.app.main``.  The demo itself lives in ``app.main`` and can
be run with ``python -m dating_app``.
"""

__all__ = []
