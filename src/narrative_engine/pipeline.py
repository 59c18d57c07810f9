# Narrative pipeline
# Input validator -> generator -> tone controller -> style validator

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from narrative_engine.generator import generate_narrative
from narrative_engine.state import (
    GenerationContext,
    NarrativeBundle,
    StyleViolation,
    ToneModifiers,
    ValidationError,
)
from narrative_engine.style_validator import validate_style
from narrative_engine.tone_controller import apply_tone_control, get_tone_modifiers
from narrative_engine.validators import validate_input

logger = logging.getLogger(__name__)

PipelineStatus = Literal["success", "validation", "style_violation"]

VALIDATION_MESSAGE = "Input validation failed"
STYLE_VIOLATION_MESSAGE = "Generated content violates style rules"
GENERATION_ERROR_MESSAGE = "Internal generation error"

STATUS_CODES: dict[str, int] = {
    "success": 200,
    "validation": 400,
    "style_violation": 422,
}


@dataclass
class PipelineResult:
    """Outcome of one pipeline run"""

    status: PipelineStatus
    bundle: Optional[NarrativeBundle] = None
    errors: list[ValidationError] = field(default_factory=list)
    violations: list[StyleViolation] = field(default_factory=list)
    tone_modifiers: Optional[ToneModifiers] = None

    @property
    def success(self) -> bool:
        return self.status == "success"

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.status]

    def to_response(self) -> tuple[int, dict[str, Any]]:
        """HTTP status code and JSON envelope for this result."""
        if self.status == "validation":
            body = error_envelope(
                "validation", VALIDATION_MESSAGE, [e.to_dict() for e in self.errors]
            )
        elif self.status == "style_violation":
            body = error_envelope(
                "style_violation", STYLE_VIOLATION_MESSAGE, [v.to_dict() for v in self.violations]
            )
        else:
            body = {"success": True, "data": self.bundle.to_dict()}
        return self.status_code, body


def error_envelope(error_type: str, message: str, details: list[dict]) -> dict[str, Any]:
    return {
        "success": False,
        "error": {"type": error_type, "message": message, "details": details},
    }


def generation_error_response() -> tuple[int, dict[str, Any]]:
    """Envelope for unexpected failures, built by the calling boundary."""
    return 500, error_envelope("generation", GENERATION_ERROR_MESSAGE, [])


def run_pipeline(raw: Any) -> PipelineResult:
    """Run the four stages on a raw request body.

    Validation and style findings come back in the result. Exceptions from the
    generator or tone controller mean a table bug and are left to propagate.
    """
    validation = validate_input(raw)
    if not validation.valid:
        logger.info(
            "Narrative input rejected",
            extra={"error_count": len(validation.errors)},
        )
        return PipelineResult(status="validation", errors=validation.errors)

    product = validation.normalized
    context = GenerationContext(
        input=product,
        tone_modifiers=get_tone_modifiers(product.energy_tone),
    )

    raw_bundle = generate_narrative(product)
    toned = apply_tone_control(raw_bundle, product.energy_tone)

    style = validate_style(toned, product.avoid_list)
    if not style.valid:
        logger.info(
            "Narrative for %s violates style rules",
            product.item_name,
            extra={"violation_count": len(style.violations)},
        )
        return PipelineResult(
            status="style_violation",
            violations=style.violations,
            tone_modifiers=context.tone_modifiers,
        )

    logger.debug(
        "Narrative generated for %s",
        product.item_name,
        extra={
            "energy_tone": product.energy_tone,
            "tone_intensity": context.tone_modifiers.intensity,
            "sentence_length": context.tone_modifiers.sentence_length,
        },
    )
    return PipelineResult(status="success", bundle=toned, tone_modifiers=context.tone_modifiers)
