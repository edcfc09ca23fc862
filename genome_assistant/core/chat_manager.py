import logging
from typing import Callable, Optional

from ..constants.constants import *
from ..settings import settings
from ..models.analysis_models import AnalysisResult, AnalysisSource
from ..models.chat_models import ChatMessage, ChatReply
from ..prompts.prompt_manager import PromptManager
from . import fallback_templates as templates
from .fallback_generator import FallbackGenerator
from .llm_factory import GeminiAPI, LLMError, create_llm

logger = logging.getLogger(__name__)


class ChatManager:
    def __init__(
        self,
        llm_factory: Callable[[Optional[str]], GeminiAPI] = create_llm,
        fallback_generator: Optional[FallbackGenerator] = None,
    ) -> None:
        self.llm_factory = llm_factory
        self.prompt_manager = PromptManager()
        self.fallback_generator = fallback_generator or FallbackGenerator()

    def get_chat_response(
        self,
        message: str,
        api_key: Optional[str],
        analysis: Optional[AnalysisResult] = None,
        conversation_history: Optional[list[ChatMessage]] = None,
    ) -> ChatReply:
        turn = len(conversation_history or [])

        if not api_key:
            return self._fallback_reply(message, turn, templates.MISSING_KEY_REASON)

        try:
            llm = self.llm_factory(api_key)
            prompt = self.prompt_manager.format_chat_prompt(
                user_message=message,
                analysis=analysis,
                conversation_history=conversation_history,
                history_limit=settings.chat_history_limit,
            )
            text = llm.generate(prompt, max_output_tokens=settings.chat_max_output_tokens).strip()
        except LLMError as e:
            logger.error(f"Chat response failed: {e}")
            return self._fallback_reply(message, turn, str(e))

        if not text:
            return self._fallback_reply(message, turn, templates.CHAT_EMPTY_REPLY_REASON)

        return ChatReply(content=text, source=AnalysisSource.MODEL)

    def _fallback_reply(self, message: str, turn: int, reason: str) -> ChatReply:
        logger.info(f"Using canned chat reply: {reason}")
        return ChatReply(
            content=self.fallback_generator.chat_reply(message, turn),
            source=AnalysisSource.FALLBACK,
            error=reason,
        )

    def get_conversation_summary(self, conversation_history: list[ChatMessage]) -> str:
        if not conversation_history:
            return "No conversation history available."
        user_messages = sum(1 for msg in conversation_history if msg.role.value == "user")
        assistant_messages = sum(1 for msg in conversation_history if msg.role.value == "assistant")

        return f"Conversation summary: {user_messages} user messages, {assistant_messages} assistant responses."
