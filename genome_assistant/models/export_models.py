from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class ExportResult:
    success: bool
    filename: str
    mime_type: str
    data: Optional[Union[bytes, str]] = None
    error: Optional[str] = None
