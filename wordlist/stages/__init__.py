"""Pipeline stages: uniqueness, ordering, case normalization.

Each stage is a plain function taking an iterable of words and returning an
iterable of words, gated by flags on `PipelineConfig`.
"""

