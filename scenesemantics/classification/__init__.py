"""Mini README: Per-label aggregation of reconstructed mesh geometry.

Exports the ``Label`` enumeration alongside the aggregator that groups
world-space vertices by the classification of the faces using them.
"""

from ..labels import LABEL_DISPLAY, Label, LabelDisplay
from .aggregator import AggregationResult, ClassificationAggregator, aggregate_by_classification

__all__ = [
    "AggregationResult",
    "ClassificationAggregator",
    "LABEL_DISPLAY",
    "Label",
    "LabelDisplay",
    "aggregate_by_classification",
]
