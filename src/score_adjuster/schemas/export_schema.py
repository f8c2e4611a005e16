from marshmallow import Schema, fields


class ExportItemSchema(Schema):
    """One entry of the id -> scores lookup"""
    title = fields.Str()
    original_score = fields.Float(attribute="mean", data_key="originalScore")
    original_rank = fields.Int(attribute="rank", data_key="originalRank")
    adjusted_score = fields.Float(data_key="adjustedScore")
    adjusted_rank = fields.Int(data_key="adjustedRank")
    year = fields.Int(attribute="start_year", allow_none=True)
    percentile_in_year = fields.Float(data_key="percentileInYear")


class ExportMetadataSchema(Schema):
    """Run description attached to an export"""
    last_updated = fields.DateTime(format="iso", data_key="lastUpdated")
    total_anime = fields.Int(data_key="totalAnime")
    baseline_period = fields.Str(data_key="baselinePeriod")
    min_scoring_users = fields.Int(data_key="minScoringUsers")
    algorithm = fields.Str()


class ExportSchema(Schema):
    """Lookup-by-id export with its metadata block"""
    metadata = fields.Nested(ExportMetadataSchema)
    anime = fields.Dict(keys=fields.Str(), values=fields.Nested(ExportItemSchema))
