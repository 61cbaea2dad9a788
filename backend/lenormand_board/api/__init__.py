"""Stable backend boundary for a board UI.

This layer is frontend-agnostic and only speaks JSON-friendly structures:
- state snapshots with per-cell highlights
- geometry bundles for the selected cell
- the structured context handed to a narrative requester
"""

from .facade import ReadingEngine
from .serde import snapshot, relations_to_dict, narrative_context, cell_to_dict

__all__ = ["ReadingEngine", "snapshot", "relations_to_dict", "narrative_context", "cell_to_dict"]
