"""Word sources: Hunspell dictionaries and plain word-list files.

Every source yields trimmed, non-empty words lazily.
"""

