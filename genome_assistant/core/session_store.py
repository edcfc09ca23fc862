import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..constants.constants import *
from ..models.analysis_models import AnalysisOutcome, AnalysisResult
from ..models.chat_models import ChatMessage, MessageKind, MessageRole
from ..models.sequence_models import SequenceValidation
from .credential_store import CredentialStore

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


class ResearchNotebook:
    """In-memory analysis history, newest entry first."""

    def __init__(self) -> None:
        self._analyses: list[AnalysisResult] = []

    @property
    def analyses(self) -> list[AnalysisResult]:
        return list(self._analyses)

    @property
    def latest(self) -> Optional[AnalysisResult]:
        return self._analyses[0] if self._analyses else None

    def __len__(self) -> int:
        return len(self._analyses)

    def is_empty(self) -> bool:
        return not self._analyses

    def record(
        self, sequence: str, outcome: AnalysisOutcome, timestamp: Optional[datetime] = None
    ) -> AnalysisResult:
        sequence_type = outcome.predictions[0].category if outcome.predictions else UNKNOWN_LABEL
        result = AnalysisResult(
            id=new_id(),
            timestamp=timestamp or datetime.now(),
            sequence=sequence,
            sequence_type=sequence_type,
            predictions=list(outcome.predictions),
            target_genes=list(outcome.target_genes),
            hypotheses=list(outcome.hypotheses),
            source=outcome.source,
        )
        self._analyses.insert(0, result)
        logger.info(f"Recorded analysis {result.id} ({result.source.value})")
        return result

    def append_note(self, text: str) -> bool:
        if not self._analyses or not text.strip():
            return False
        self._analyses[0].notes.append(text)
        return True

    def clear(self) -> None:
        self._analyses.clear()
        logger.info("Analysis history cleared")


@dataclass
class AppState:
    """Everything one UI session owns. Held in ``st.session_state``."""

    credentials: CredentialStore = field(default_factory=CredentialStore)
    notebook: ResearchNotebook = field(default_factory=ResearchNotebook)
    raw_input: str = ""
    validation: Optional[SequenceValidation] = None
    current: Optional[AnalysisOutcome] = None
    is_analyzing: bool = False
    chat_messages: list[ChatMessage] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.chat_messages:
            self.chat_messages.append(
                ChatMessage(id=new_id(), role=MessageRole.ASSISTANT, content=CHAT_GREETING)
            )

    @property
    def has_results(self) -> bool:
        return self.current is not None and bool(self.current.predictions)

    def add_message(
        self, role: MessageRole, content: str, kind: MessageKind = MessageKind.TEXT
    ) -> ChatMessage:
        message = ChatMessage(id=new_id(), role=role, content=content, kind=kind)
        self.chat_messages.append(message)
        return message
