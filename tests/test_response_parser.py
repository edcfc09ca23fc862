"""Tests for decoding and coercing model analysis responses."""

import json

import pytest

from genome_assistant.constants.constants import DEFAULT_HYPOTHESIS_TYPE, DEFAULT_STRENGTH
from genome_assistant.core.response_parser import (
    MalformedResponseError,
    coerce_hypotheses,
    coerce_predictions,
    coerce_target_genes,
    decode_analysis_json,
    parse_analysis_response,
    strip_markdown_fences,
)


class TestDecoding:
    """Test cases for JSON extraction from model text."""

    def test_strip_fences(self):
        assert strip_markdown_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
        assert strip_markdown_fences('```\n{"a": 1}```') == '{"a": 1}'

    def test_plain_json(self):
        assert decode_analysis_json('{"predictions": []}') == {"predictions": []}

    def test_invalid_json(self):
        with pytest.raises(MalformedResponseError):
            decode_analysis_json("Sorry, I cannot analyze this sequence.")

    def test_non_object_json(self):
        with pytest.raises(MalformedResponseError):
            decode_analysis_json("[1, 2, 3]")

    def test_empty_text(self):
        with pytest.raises(MalformedResponseError):
            decode_analysis_json("")


class TestCoercePredictions:
    """Test cases for prediction records."""

    def test_fields_and_ids(self, model_payload):
        predictions = coerce_predictions(model_payload["predictions"])

        assert [p.id for p in predictions] == ["pred-1", "pred-2"]
        assert predictions[0].name == "Enhancer"
        assert predictions[0].confidence == 87
        assert predictions[0].disease_associations == ["Congenital heart disease"]
        assert predictions[1].disease_associations == []

    def test_confidence_is_clamped(self):
        predictions = coerce_predictions([{"name": "a", "confidence": 140}, {"name": "b", "confidence": -5}])

        assert [p.confidence for p in predictions] == [100, 0]

    def test_missing_fields_get_defaults(self):
        prediction = coerce_predictions([{}])[0]

        assert prediction.name == "Unknown function"
        assert prediction.confidence == 0
        assert prediction.evidence == []

    def test_non_list_is_empty(self):
        assert coerce_predictions("nope") == []
        assert coerce_predictions(None) == []

    def test_non_dict_items_are_skipped(self):
        predictions = coerce_predictions(["junk", {"name": "real"}])

        assert [p.name for p in predictions] == ["real"]
        assert predictions[0].id == "pred-1"


class TestCoerceTargetGenes:
    """Test cases for building the gene list from the network block."""

    def test_relationships_then_genes(self, model_payload):
        genes = coerce_target_genes(model_payload["regulatory_network"])

        assert [g.name for g in genes] == ["GATA4", "NKX2-5", "TBX5"]
        assert [g.id for g in genes] == ["gene-0", "gene-1", "gene-2"]
        assert genes[0].relationship == "activation"
        assert genes[0].strength == 0.9
        assert genes[1].relationship == "repression"
        assert genes[2].strength == DEFAULT_STRENGTH

    def test_duplicates_are_merged(self):
        genes = coerce_target_genes(
            {"relationships": [{"to": "SOX2", "type": "activation"}, {"to": "SOX2", "type": "repression"}]}
        )

        assert len(genes) == 1
        assert genes[0].relationship == "activation"

    def test_unknown_relationship_becomes_activation(self):
        genes = coerce_target_genes({"relationships": [{"to": "MYC", "type": "inhibition"}]})

        assert genes[0].relationship == "activation"

    def test_strength_is_clamped(self):
        genes = coerce_target_genes(
            {"relationships": [{"to": "A", "strength": 3}, {"to": "B", "strength": "weak"}]}
        )

        assert genes[0].strength == 1.0
        assert genes[1].strength == DEFAULT_STRENGTH

    def test_sequence_node_is_not_a_gene(self):
        genes = coerce_target_genes({"genes": ["DNA_SEQUENCE", "CTCF"]})

        assert [g.name for g in genes] == ["CTCF"]

    def test_missing_network(self):
        assert coerce_target_genes(None) == []


class TestCoerceHypotheses:
    """Test cases for hypothesis records."""

    def test_method_maps_to_approach(self, model_payload):
        hypothesis = coerce_hypotheses(model_payload["hypotheses"])[0]

        assert hypothesis.id == "hyp-1"
        assert hypothesis.approach == "Luciferase reporter assay"
        assert hypothesis.experiment_type == DEFAULT_HYPOTHESIS_TYPE


class TestParseAnalysisResponse:
    """Test cases for the full response pipeline."""

    def test_fenced_response(self, model_text):
        predictions, genes, hypotheses = parse_analysis_response(model_text)

        assert len(predictions) == 2
        assert len(genes) == 3
        assert len(hypotheses) == 1

    def test_empty_object(self):
        assert parse_analysis_response(json.dumps({})) == ([], [], [])
