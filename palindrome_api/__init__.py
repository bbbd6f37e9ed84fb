"""
Top‑level package for the Palindrome Message API.

This file makes ``palindrome_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``palindrome_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
