"""Tests for chat replies and prompt building."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from genome_assistant.core import fallback_templates as templates
from genome_assistant.core.chat_manager import ChatManager
from genome_assistant.core.llm_factory import LLMConnectionError
from genome_assistant.models.analysis_models import AnalysisResult, AnalysisSource
from genome_assistant.models.chat_models import ChatMessage, MessageRole
from genome_assistant.prompts.prompt_manager import PromptManager
from genome_assistant.settings import settings


@pytest.fixture
def history():
    return [
        ChatMessage(id=str(i), role=MessageRole.USER if i % 2 else MessageRole.ASSISTANT, content=f"message {i}")
        for i in range(10)
    ]


@pytest.fixture
def analysis(sample_outcome):
    return AnalysisResult(
        id="a1",
        timestamp=datetime(2024, 1, 1, 12, 0),
        sequence="ATGC" * 20,
        sequence_type="Gene Regulation",
        predictions=sample_outcome.predictions,
        target_genes=sample_outcome.target_genes,
        hypotheses=sample_outcome.hypotheses,
        source=AnalysisSource.MODEL,
    )


class TestChatManager:
    """Test cases for model and fallback chat replies."""

    def test_model_reply(self, analysis, history):
        llm = Mock()
        llm.generate.return_value = "  Try a reporter assay.  "
        manager = ChatManager(llm_factory=Mock(return_value=llm))

        reply = manager.get_chat_response("Active in liver", "key", analysis, history)

        assert reply.source is AnalysisSource.MODEL
        assert reply.content == "Try a reporter assay."
        assert reply.error is None
        assert llm.generate.call_args.kwargs["max_output_tokens"] == settings.chat_max_output_tokens

    def test_missing_key(self):
        factory = Mock()
        reply = ChatManager(llm_factory=factory).get_chat_response("hello", "")

        factory.assert_not_called()
        assert reply.source is AnalysisSource.FALLBACK
        assert reply.content in templates.CHAT_FALLBACK_RESPONSES
        assert reply.error == templates.MISSING_KEY_REASON

    def test_model_error(self):
        llm = Mock()
        llm.generate.side_effect = LLMConnectionError("offline")
        reply = ChatManager(llm_factory=Mock(return_value=llm)).get_chat_response("hello", "key")

        assert reply.source is AnalysisSource.FALLBACK
        assert reply.error == "offline"

    def test_blank_model_reply(self):
        llm = Mock()
        llm.generate.return_value = "   "
        reply = ChatManager(llm_factory=Mock(return_value=llm)).get_chat_response("hello", "key")

        assert reply.source is AnalysisSource.FALLBACK
        assert reply.error == templates.CHAT_EMPTY_REPLY_REASON

    def test_conversation_summary(self, history):
        manager = ChatManager(llm_factory=Mock())

        assert manager.get_conversation_summary([]) == "No conversation history available."
        assert manager.get_conversation_summary(history) == (
            "Conversation summary: 5 user messages, 5 assistant responses."
        )


class TestPromptManager:
    """Test cases for prompt assembly."""

    def test_chat_prompt_includes_context(self, analysis, history):
        prompt = PromptManager().format_chat_prompt("Active in liver", analysis, history, history_limit=4)

        assert "Active in liver" in prompt
        assert "GATA4 (activation)" in prompt
        assert "Enhancer <core> (85%)" in prompt
        assert "message 9" in prompt
        assert "message 5" not in prompt

    def test_chat_prompt_without_analysis(self):
        prompt = PromptManager().format_chat_prompt("hello")

        assert "hello" in prompt

    def test_history_labels(self, history):
        text = PromptManager().format_conversation_history(history[:2])

        assert text == "Assistant: message 0\nResearcher: message 1"

    def test_user_braces_are_kept(self):
        prompt = PromptManager().format_chat_prompt("what about {this}?")

        assert "what about {this}?" in prompt
