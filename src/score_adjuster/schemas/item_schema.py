from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from score_adjuster.models import ScoredItem


class ScoredItemSchema(Schema):
    """Schema for rated items handed over by the fetch/storage step"""

    class Meta:
        unknown = EXCLUDE

    id = fields.Int(required=True, strict=True)
    title = fields.Str(required=True)
    mean = fields.Float(required=True, validate=validate.Range(min=0.0, max=10.0))
    rank = fields.Int(required=True, validate=validate.Range(min=1))
    start_year = fields.Int(data_key="startYear", allow_none=True, load_default=None)
    num_scoring_users = fields.Int(
        data_key="numScoringUsers", required=True, validate=validate.Range(min=0)
    )

    @post_load
    def make_item(self, data, **kwargs):
        return ScoredItem(**data)


class AdjustedScoreUpdateSchema(Schema):
    """Schema for per-item score updates keyed by item id"""
    id = fields.Int(required=True)
    adjusted_score = fields.Float(data_key="adjustedScore", required=True)
    adjusted_rank = fields.Int(data_key="adjustedRank", required=True)


def load_items(records) -> list:
    """Validate raw records and turn them into ScoredItems"""
    return ScoredItemSchema(many=True).load(records)
