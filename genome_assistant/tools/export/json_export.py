import json
import logging
from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

from ...constants.constants import *
from ...models.analysis_models import AnalysisResult
from .errors import ExportError

logger = logging.getLogger(__name__)


def history_filename(today: Optional[datetime] = None) -> str:
    return JSON_FILENAME_TEMPLATE.format(date=(today or datetime.now()).strftime("%Y-%m-%d"))


def analysis_to_dict(analysis: AnalysisResult) -> dict[str, Any]:
    data = asdict(analysis)
    data["timestamp"] = analysis.timestamp.isoformat()
    data["source"] = analysis.source.value
    return data


def export_history_json(history: list[AnalysisResult]) -> str:
    if not history:
        raise ExportError("No analyses to export.")

    try:
        data = json.dumps(
            [analysis_to_dict(analysis) for analysis in history],
            indent=JSON_EXPORT_INDENT,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        logger.error(f"JSON export error: {e}")
        raise ExportError(f"Could not serialize analysis history: {e}") from e

    logger.info(f"Exported {len(history)} analyses to JSON")
    return data
