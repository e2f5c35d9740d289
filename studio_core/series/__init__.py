"""Monthly series windowing and chart payload shaping."""

from .charts import ChartSeriesTransformer, round_half_up, truncate_label
from .rolling import RollingWindowAligner, align_series

__all__ = [
    "ChartSeriesTransformer",
    "RollingWindowAligner",
    "align_series",
    "round_half_up",
    "truncate_label",
]
