from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NetworkNode:
    id: str
    label: str
    x: float
    y: float
    relationship: Optional[str] = None
    strength: float = 0.0
    description: str = ""


@dataclass
class NetworkLayout:
    center: NetworkNode
    genes: list[NetworkNode] = field(default_factory=list)
    radius: float = 0.0
