from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .analysis_models import AnalysisSource


class MessageRole(Enum):
    USER = "user"
    ASSISTANT = "assistant"


class MessageKind(Enum):
    TEXT = "text"
    VOICE = "voice"


@dataclass
class ChatMessage:
    id: str
    role: MessageRole
    content: str
    timestamp: datetime = field(default_factory=datetime.now)
    kind: MessageKind = MessageKind.TEXT


@dataclass
class ChatReply:
    content: str
    source: AnalysisSource
    error: Optional[str] = None
