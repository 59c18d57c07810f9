"""Service that bridges the FastAPI routes with the narrative_engine pipeline."""

import logging
from typing import Any

from app.logging_config import bind_request_context
from narrative_engine.pipeline import run_pipeline
from narrative_engine.state import (
    EMOTIONAL_CORES,
    ENERGY_TONES,
    INTENDED_USES,
    ITEM_TYPES,
    LIMITED_TYPES,
    PRIMARY_SYMBOLS,
)

logger = logging.getLogger(__name__)


class NarrativeService:
    """Runs the narrative pipeline and shapes results for HTTP."""

    def generate(self, body: Any) -> tuple[int, dict[str, Any]]:
        """Run the pipeline on a decoded request body.

        Returns:
            (status_code, envelope): 200 success, 400 validation, 422 style violation
        """
        result = run_pipeline(body)
        status_code, envelope = result.to_response()

        bind_request_context(narrative_outcome=result.status)
        if result.tone_modifiers is not None:
            bind_request_context(tone_intensity=result.tone_modifiers.intensity)

        logger.info(
            "Narrative request finished with %s",
            result.status,
            extra={
                "narrative_outcome": result.status,
                "error_count": len(result.errors),
                "violation_count": len(result.violations),
            },
        )
        return status_code, envelope

    def options(self) -> dict[str, list[str]]:
        """Closed value sets for each enum field, in validation order."""
        return {
            "item_type": list(ITEM_TYPES),
            "primary_symbol": list(PRIMARY_SYMBOLS),
            "emotional_core": list(EMOTIONAL_CORES),
            "energy_tone": list(ENERGY_TONES),
            "limited": list(LIMITED_TYPES),
            "intended_use": list(INTENDED_USES),
        }
