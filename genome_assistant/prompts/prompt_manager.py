import logging
from typing import Optional

from ..constants.constants import *
from ..models.analysis_models import AnalysisResult
from ..models.chat_models import ChatMessage, MessageRole
from ..models.sequence_models import SequenceValidation
from .prompt_templates import PromptTemplates

logger = logging.getLogger(__name__)


class PromptManager:

    def format_analysis_prompt(self, validation: SequenceValidation) -> str:
        return PromptTemplates.get_analysis_prompt().format(
            sequence=validation.cleaned_sequence,
            length=validation.length,
            gc_content=validation.gc_content,
        )

    def format_analysis_context(self, analysis: Optional[AnalysisResult]) -> str:
        if analysis is None:
            return PromptTemplates.get_no_analysis_context()

        predictions = ", ".join(
            f"{p.name} ({p.confidence}%)" for p in analysis.predictions[:PROMPT_MAX_CONTEXT_PREDICTIONS]
        )
        genes = ", ".join(
            f"{g.name} ({g.relationship})" for g in analysis.target_genes[:PROMPT_MAX_CONTEXT_GENES]
        )

        return PromptTemplates.get_analysis_context_template().format(
            sequence_type=analysis.sequence_type,
            predictions=predictions or "none",
            genes=genes or "none",
        )

    def format_conversation_history(
        self, conversation_history: Optional[list[ChatMessage]], limit: int = PROMPT_RECENT_HISTORY_LIMIT
    ) -> str:
        if not conversation_history:
            return ""

        history_lines = []
        for msg in conversation_history[-limit:]:
            if msg.role is MessageRole.USER:
                history_lines.append(f"Researcher: {msg.content}")
            elif msg.role is MessageRole.ASSISTANT:
                history_lines.append(f"Assistant: {msg.content}")

        return "\n".join(history_lines)

    def format_chat_prompt(
        self,
        user_message: str,
        analysis: Optional[AnalysisResult] = None,
        conversation_history: Optional[list[ChatMessage]] = None,
        history_limit: int = PROMPT_RECENT_HISTORY_LIMIT,
    ) -> str:
        return PromptTemplates.get_chat_prompt().format(
            analysis_context=self.format_analysis_context(analysis),
            conversation_history=self.format_conversation_history(conversation_history, history_limit),
            user_message=user_message,
        )
