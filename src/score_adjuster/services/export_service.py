from datetime import datetime, timezone

from score_adjuster.config import setup_logger, OutputConfig
from score_adjuster.schemas import AdjustedScoreUpdateSchema, ExportSchema

logger = setup_logger(name="ExportService")


class ExportService:
    """Shapes a normalization result for storage and export consumers"""

    def __init__(self):
        self.output = OutputConfig()

    def build_payload(self, result, generated_at=None) -> dict:
        """
        Lookup-by-id payload plus a metadata block.

        Parameters:
            result: NormalizationResult
            generated_at: Timestamp for `lastUpdated`, defaults to now (UTC)

        Returns:
            Dict with `metadata` and `anime` (str(id) -> scores)
        """
        generated_at = generated_at or datetime.now(timezone.utc)
        payload = ExportSchema().dump({
            'metadata': {
                'last_updated': generated_at,
                'total_anime': len(result.items),
                'baseline_period': result.config.baseline_period,
                'min_scoring_users': result.config.min_scoring_users,
                'algorithm': self.output.algorithm,
            },
            'anime': {str(item.id): item for item in result.items},
        })
        logger.info(f"Prepared export payload for {len(result.items)} items")
        return payload

    @staticmethod
    def build_updates(result) -> list:
        """Per-item adjusted score/rank records for a bulk upsert keyed by id"""
        return AdjustedScoreUpdateSchema(many=True).dump(result.items)
