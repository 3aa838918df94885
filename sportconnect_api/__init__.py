"""
Top‑level package for the SportConnect match API.

This file makes ``sportconnect_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``sportconnect_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
