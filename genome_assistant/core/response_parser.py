import json
import logging
import re
from typing import Any

from ..constants.constants import *
from ..models.analysis_models import FunctionPrediction, Hypothesis, TargetGene

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?\n?")


class MalformedResponseError(ValueError):
    pass


def strip_markdown_fences(text: str) -> str:
    return _CODE_FENCE_RE.sub("", text).strip()


def decode_analysis_json(text: str) -> dict[str, Any]:
    json_text = strip_markdown_fences(text or "")
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {e}; raw text: {json_text[:200]}")
        raise MalformedResponseError(
            "Error processing results. The AI response was not valid JSON."
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError("The AI response was not a JSON object.")
    return data


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    return []


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _as_text_list(value: Any) -> list[str]:
    if isinstance(value, list):
        return [str(item) for item in value if item not in (None, "")]
    if value in (None, ""):
        return []
    return [str(value)]


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def _as_confidence(value: Any) -> int:
    try:
        return int(round(_clamp(float(value), 0, 100)))
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE


def _as_strength(value: Any) -> float:
    try:
        return _clamp(float(value), 0.0, 1.0)
    except (TypeError, ValueError):
        return DEFAULT_STRENGTH


def _as_relationship(value: Any) -> str:
    if isinstance(value, str) and value.strip().lower() == REPRESSION_RELATIONSHIP:
        return REPRESSION_RELATIONSHIP
    return DEFAULT_RELATIONSHIP


def coerce_predictions(raw: Any) -> list[FunctionPrediction]:
    predictions = []
    for index, item in enumerate(item for item in _as_list(raw) if isinstance(item, dict)):
        predictions.append(
            FunctionPrediction(
                id=f"{PREDICTION_ID_PREFIX}-{index + 1}",
                name=_as_text(item.get("name"), DEFAULT_PREDICTION_NAME),
                category=_as_text(item.get("category"), DEFAULT_PREDICTION_CATEGORY),
                confidence=_as_confidence(item.get("confidence")),
                mechanism=_as_text(item.get("mechanism")),
                evidence=_as_text_list(item.get("evidence")),
                disease_associations=_as_text_list(item.get("diseases")),
            )
        )
    return predictions


def coerce_target_genes(raw_network: Any) -> list[TargetGene]:
    network = _as_dict(raw_network)
    genes: list[TargetGene] = []
    seen: set[str] = set()

    for relationship in _as_list(network.get("relationships")):
        if not isinstance(relationship, dict):
            continue
        name = _as_text(relationship.get("to"))
        if not name or name in seen:
            continue
        seen.add(name)
        genes.append(
            TargetGene(
                id=f"{GENE_ID_PREFIX}-{len(genes)}",
                name=name,
                relationship=_as_relationship(relationship.get("type")),
                strength=_as_strength(relationship.get("strength")),
                description=_as_text(relationship.get("description")),
            )
        )

    for raw_name in _as_list(network.get("genes")):
        name = _as_text(raw_name)
        if not name or name in seen or name == SEQUENCE_NODE_ID:
            continue
        seen.add(name)
        genes.append(
            TargetGene(
                id=f"{GENE_ID_PREFIX}-{len(genes)}",
                name=name,
                relationship=DEFAULT_RELATIONSHIP,
                strength=DEFAULT_STRENGTH,
                description="",
            )
        )

    return genes


def coerce_hypotheses(raw: Any) -> list[Hypothesis]:
    hypotheses = []
    for index, item in enumerate(item for item in _as_list(raw) if isinstance(item, dict)):
        method = _as_text(item.get("method"))
        hypotheses.append(
            Hypothesis(
                id=f"{HYPOTHESIS_ID_PREFIX}-{index + 1}",
                statement=_as_text(item.get("statement")),
                experiment_type=_as_text(item.get("experiment_type"), DEFAULT_HYPOTHESIS_TYPE),
                approach=method,
                expected_outcome=_as_text(item.get("expected_outcome")),
                resources=_as_text(item.get("resources")),
                timeline=_as_text(item.get("timeline")),
            )
        )
    return hypotheses


def parse_analysis_response(
    text: str,
) -> tuple[list[FunctionPrediction], list[TargetGene], list[Hypothesis]]:
    data = decode_analysis_json(text)
    predictions = coerce_predictions(data.get("predictions"))
    target_genes = coerce_target_genes(data.get("regulatory_network"))
    hypotheses = coerce_hypotheses(data.get("hypotheses"))

    logger.info(
        f"Parsed model response: {len(predictions)} predictions, "
        f"{len(target_genes)} genes, {len(hypotheses)} hypotheses"
    )
    return predictions, target_genes, hypotheses
