"""Hypothesis strategies for flatl10n property-based testing.

Usage:
    from tests.strategies.trees import translation_trees, dotted_segments
"""

from .trees import (
    dotted_segments,
    leaf_paths,
    leaf_values,
    plain_segments,
    translation_trees,
)

__all__ = [
    "dotted_segments",
    "leaf_paths",
    "leaf_values",
    "plain_segments",
    "translation_trees",
]
