"""Shared fixtures for the test suite."""

import json
from unittest.mock import Mock

import pytest

from genome_assistant.core.credential_store import CredentialStore
from genome_assistant.models.analysis_models import (
    AnalysisOutcome,
    AnalysisSource,
    FunctionPrediction,
    Hypothesis,
    TargetGene,
)
from genome_assistant.settings import settings


@pytest.fixture(autouse=True)
def no_environment_key(monkeypatch):
    """Keep a developer's GEMINI_API_KEY out of the tests."""
    monkeypatch.setattr(settings, "gemini_api_key", "")


@pytest.fixture
def valid_sequence():
    return "ATGC" * 20


@pytest.fixture
def credential_store(tmp_path):
    return CredentialStore(path=tmp_path / "credentials.json")


@pytest.fixture
def model_payload():
    """A well-formed analysis response as the model would return it."""
    return {
        "sequence_stats": {"length": 80, "gc_content": 50},
        "predictions": [
            {
                "name": "Enhancer",
                "confidence": 87,
                "category": "Gene Regulation",
                "mechanism": "Binds tissue-specific factors.",
                "evidence": ["Conserved motif", "Open chromatin"],
                "diseases": ["Congenital heart disease"],
            },
            {
                "name": "Insulator",
                "confidence": 62,
                "category": "Chromatin Structure",
                "mechanism": "Blocks enhancer-promoter contacts.",
                "evidence": ["CTCF motif"],
                "diseases": [],
            },
        ],
        "regulatory_network": {
            "genes": ["GATA4", "NKX2-5", "TBX5"],
            "relationships": [
                {"from": "DNA_SEQUENCE", "to": "GATA4", "type": "activation", "strength": 0.9},
                {"from": "DNA_SEQUENCE", "to": "NKX2-5", "type": "Repression", "strength": 0.4},
            ],
        },
        "hypotheses": [
            {
                "statement": "The element drives cardiac expression.",
                "method": "Luciferase reporter assay",
                "expected_outcome": "Higher signal in cardiomyocytes",
                "resources": "Reporter plasmids",
                "timeline": "4 weeks",
            }
        ],
    }


@pytest.fixture
def model_text(model_payload):
    return "```json\n" + json.dumps(model_payload) + "\n```"


@pytest.fixture
def fake_llm(model_text):
    llm = Mock()
    llm.generate.return_value = model_text
    return llm


@pytest.fixture
def sample_outcome():
    return AnalysisOutcome(
        source=AnalysisSource.MODEL,
        predictions=[
            FunctionPrediction(
                id="pred-1",
                name="Enhancer <core>",
                category="Gene Regulation",
                confidence=85,
                mechanism="Recruits activators & co-activators.",
                evidence=["Conserved motif"],
                disease_associations=["Cardiomyopathy"],
            )
        ],
        target_genes=[
            TargetGene(id="gene-0", name="GATA4", relationship="activation", strength=0.8,
                       description="GATA Binding Protein 4 - Cardiac transcription factor"),
            TargetGene(id="gene-1", name="MYC", relationship="repression", strength=0.3, description=""),
        ],
        hypotheses=[
            Hypothesis(
                id="hyp-1",
                statement="The element enhances GATA4 expression.",
                experiment_type="Reporter Assay",
                approach="Luciferase assay",
                expected_outcome="2-fold increase",
                resources="Plasmids",
                timeline="4-6 weeks",
            )
        ],
    )
