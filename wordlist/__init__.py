"""Wordlist package.

Avoid importing heavy submodules at package import time to prevent side-effects
(like logger configuration) during test collection.
"""

__version__ = "0.3.0"

__all__: list[str] = []
