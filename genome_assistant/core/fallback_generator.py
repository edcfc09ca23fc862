import hashlib
import logging
import random
import re
from typing import Any, Optional

from ..constants.constants import *
from ..models.analysis_models import (
    AnalysisOutcome,
    AnalysisSource,
    FunctionPrediction,
    Hypothesis,
    TargetGene,
)
from ..tools.bio.sequence_utils import get_sequence_stats
from . import fallback_templates as templates

logger = logging.getLogger(__name__)


def seeded_random(*parts: str) -> random.Random:
    digest = hashlib.sha256("\x1f".join(parts).encode("utf-8")).hexdigest()
    return random.Random(int(digest[:16], 16))


class FallbackGenerator:
    """Builds synthetic analysis data when the model cannot be used.

    Output depends only on the sequence, so repeated fallbacks for the same
    input are identical.
    """

    def generate(self, sequence: str, reason: str) -> AnalysisOutcome:
        rng = seeded_random("analysis", sequence)
        predictions = self.generate_predictions(sequence, rng)
        target_genes = self.generate_target_genes(rng)
        hypotheses = self.generate_hypotheses(predictions)

        logger.warning(f"Using fallback analysis data: {reason}")
        return AnalysisOutcome(
            source=AnalysisSource.FALLBACK,
            predictions=predictions,
            target_genes=target_genes,
            hypotheses=hypotheses,
            error=reason,
        )

    def generate_predictions(
        self, sequence: str, rng: Optional[random.Random] = None
    ) -> list[FunctionPrediction]:
        rng = rng or seeded_random("analysis", sequence)
        gc_content = get_sequence_stats(sequence).gc_content

        candidates = []
        if TATA_BOX_MOTIF in sequence:
            candidates.append(templates.CORE_PROMOTER_PREDICTION)
        if gc_content > CPG_ISLAND_GC_THRESHOLD:
            candidates.append(templates.CPG_ISLAND_PREDICTION)
        if re.search(SILENCER_MOTIF_PATTERN, sequence):
            candidates.append(templates.SILENCER_PREDICTION)
        candidates.append(templates.ENHANCER_PREDICTION)
        candidates.append(templates.TF_BINDING_PREDICTION)

        predictions = [
            self._build_prediction(template, rng, gc_content) for template in candidates
        ]
        predictions.sort(key=lambda p: p.confidence, reverse=True)
        predictions = predictions[:FALLBACK_MAX_PREDICTIONS]

        for index, prediction in enumerate(predictions):
            prediction.id = f"{PREDICTION_ID_PREFIX}-{index + 1}"
        return predictions

    def _build_prediction(
        self, template: dict[str, Any], rng: random.Random, gc_content: float
    ) -> FunctionPrediction:
        confidence = template["base_confidence"] + rng.randrange(template["confidence_span"])
        return FunctionPrediction(
            id="",
            name=template["name"],
            category=template["category"],
            confidence=confidence,
            mechanism=template["mechanism"],
            evidence=[item.format(gc_content=gc_content) for item in template["evidence"]],
            disease_associations=list(template["diseases"]),
        )

    def generate_target_genes(self, rng: random.Random) -> list[TargetGene]:
        panel = rng.sample(templates.GENE_PANEL, FALLBACK_GENE_COUNT)
        genes = []
        for index, (name, full_name, role) in enumerate(panel):
            relationship = (
                DEFAULT_RELATIONSHIP
                if rng.random() > FALLBACK_ACTIVATION_THRESHOLD
                else REPRESSION_RELATIONSHIP
            )
            genes.append(
                TargetGene(
                    id=f"{GENE_ID_PREFIX}-{index}",
                    name=name,
                    full_name=full_name,
                    relationship=relationship,
                    strength=FALLBACK_MIN_STRENGTH + rng.random() * FALLBACK_STRENGTH_SPAN,
                    description=templates.GENE_DESCRIPTION_TEMPLATE.format(
                        full_name=full_name, role=role
                    ),
                )
            )
        return genes

    def generate_hypotheses(self, predictions: list[FunctionPrediction]) -> list[Hypothesis]:
        element = predictions[0].name.lower() if predictions else templates.DEFAULT_ELEMENT_NAME
        return [
            Hypothesis(
                id=f"{HYPOTHESIS_ID_PREFIX}-{index + 1}",
                statement=template["statement"].format(element=element),
                experiment_type=template["experiment_type"],
                approach=template["approach"],
                expected_outcome=template["expected_outcome"],
                resources=template["resources"],
                timeline=template["timeline"],
            )
            for index, template in enumerate(templates.HYPOTHESES)
        ]

    def chat_reply(self, message: str, turn: int) -> str:
        rng = seeded_random("chat", message, str(turn))
        return rng.choice(templates.CHAT_FALLBACK_RESPONSES)
