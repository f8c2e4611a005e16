from .item_schema import ScoredItemSchema, AdjustedScoreUpdateSchema, load_items
from .export_schema import ExportItemSchema, ExportMetadataSchema, ExportSchema

__all__ = [
    "ScoredItemSchema",
    "AdjustedScoreUpdateSchema",
    "load_items",
    "ExportItemSchema",
    "ExportMetadataSchema",
    "ExportSchema",
]
