"""Tests for the research notebook, session state and credential storage."""

import json
from datetime import datetime

import pytest

from genome_assistant.constants.constants import CHAT_GREETING
from genome_assistant.core.credential_store import CredentialStore
from genome_assistant.core.session_store import AppState, ResearchNotebook
from genome_assistant.models.analysis_models import AnalysisOutcome, AnalysisSource
from genome_assistant.models.chat_models import MessageKind, MessageRole
from genome_assistant.settings import settings


class TestResearchNotebook:
    """Test cases for the in-memory analysis history."""

    @pytest.fixture
    def notebook(self):
        return ResearchNotebook()

    def test_newest_first(self, notebook, sample_outcome):
        first = notebook.record("AAAA", sample_outcome, datetime(2024, 1, 1))
        second = notebook.record("CCCC", sample_outcome, datetime(2024, 1, 2))

        assert notebook.analyses == [second, first]
        assert notebook.latest is second
        assert len(notebook) == 2

    def test_record_fields(self, notebook, sample_outcome):
        result = notebook.record("ATGC", sample_outcome)

        assert result.sequence == "ATGC"
        assert result.sequence_type == "Gene Regulation"
        assert result.source is AnalysisSource.MODEL
        assert result.notes == []
        assert result.id

    def test_unknown_type_without_predictions(self, notebook):
        result = notebook.record("ATGC", AnalysisOutcome(source=AnalysisSource.FALLBACK))

        assert result.sequence_type == "Unknown"

    def test_append_note(self, notebook, sample_outcome):
        assert not notebook.append_note("too early")

        notebook.record("ATGC", sample_outcome)
        assert notebook.append_note("Active in liver")
        assert not notebook.append_note("   ")
        assert notebook.latest.notes == ["Active in liver"]

    def test_analyses_is_a_copy(self, notebook, sample_outcome):
        notebook.record("ATGC", sample_outcome)
        notebook.analyses.clear()

        assert len(notebook) == 1

    def test_clear(self, notebook, sample_outcome):
        notebook.record("ATGC", sample_outcome)
        notebook.clear()

        assert notebook.is_empty()
        assert notebook.latest is None


class TestAppState:
    """Test cases for per-session state."""

    def test_starts_with_greeting(self, credential_store):
        state = AppState(credentials=credential_store)

        assert len(state.chat_messages) == 1
        assert state.chat_messages[0].role is MessageRole.ASSISTANT
        assert state.chat_messages[0].content == CHAT_GREETING
        assert not state.has_results
        assert not state.is_analyzing

    def test_add_message(self, credential_store):
        state = AppState(credentials=credential_store)
        message = state.add_message(MessageRole.USER, "hi", MessageKind.VOICE)

        assert state.chat_messages[-1] is message
        assert message.kind is MessageKind.VOICE

    def test_states_are_independent(self, credential_store):
        first = AppState(credentials=credential_store)
        second = AppState(credentials=credential_store)
        first.add_message(MessageRole.USER, "hi")

        assert len(second.chat_messages) == 1


class TestCredentialStore:
    """Test cases for the API key store."""

    def test_empty_store(self, credential_store):
        assert credential_store.get_api_key() == ""
        assert not credential_store.has_api_key()

    def test_set_and_get(self, credential_store):
        credential_store.set_api_key("  AIza-test  ")

        assert credential_store.get_api_key() == "AIza-test"
        assert credential_store.has_api_key()
        assert json.loads(credential_store.path.read_text()) == {"gemini_api_key": "AIza-test"}

    def test_persists_across_instances(self, credential_store):
        credential_store.set_api_key("AIza-test")

        assert CredentialStore(path=credential_store.path).get_api_key() == "AIza-test"

    def test_creates_parent_directory(self, tmp_path):
        store = CredentialStore(path=tmp_path / "nested" / "dir" / "credentials.json")
        store.set_api_key("k")

        assert store.path.exists()

    def test_corrupt_file(self, credential_store):
        credential_store.path.write_text("{not json")

        assert credential_store.get_api_key() == ""

    def test_falls_back_to_settings(self, credential_store, monkeypatch):
        monkeypatch.setattr(settings, "gemini_api_key", "env-key")

        assert credential_store.get_api_key() == "env-key"

        credential_store.set_api_key("stored-key")
        assert credential_store.get_api_key() == "stored-key"
