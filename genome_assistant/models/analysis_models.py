from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class AnalysisSource(Enum):
    MODEL = "model"
    FALLBACK = "fallback"


@dataclass
class FunctionPrediction:
    id: str
    name: str
    category: str
    confidence: int
    mechanism: str
    evidence: list[str] = field(default_factory=list)
    disease_associations: list[str] = field(default_factory=list)


@dataclass
class TargetGene:
    id: str
    name: str
    relationship: str
    strength: float
    description: str
    full_name: Optional[str] = None

    @property
    def is_activation(self) -> bool:
        return self.relationship != "repression"


@dataclass
class Hypothesis:
    id: str
    statement: str
    experiment_type: str
    approach: str
    expected_outcome: str
    resources: str
    timeline: str


@dataclass
class AnalysisOutcome:
    """Result of one analysis request, tagged with where the data came from.

    ``FALLBACK`` outcomes hold locally generated demo data and carry the
    reason the model could not be used in ``error``.
    """

    source: AnalysisSource
    predictions: list[FunctionPrediction] = field(default_factory=list)
    target_genes: list[TargetGene] = field(default_factory=list)
    hypotheses: list[Hypothesis] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source is AnalysisSource.FALLBACK


@dataclass
class AnalysisResult:
    id: str
    timestamp: datetime
    sequence: str
    sequence_type: str
    predictions: list[FunctionPrediction]
    target_genes: list[TargetGene]
    hypotheses: list[Hypothesis]
    source: AnalysisSource
    notes: list[str] = field(default_factory=list)
