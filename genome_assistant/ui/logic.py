import logging
from typing import Optional

from ..constants.constants import *
from ..core.analysis_service import SequenceAnalyzer
from ..core.chat_manager import ChatManager
from ..core.session_store import AppState
from ..models.analysis_models import AnalysisResult
from ..models.chat_models import ChatReply, MessageKind, MessageRole
from ..models.export_models import ExportResult
from ..models.network_models import NetworkLayout
from ..models.sequence_models import ExampleSequence, SequenceStats, SequenceValidation
from ..tools.bio.sequence_utils import EXAMPLE_SEQUENCES, get_sequence_stats, read_sequence_file
from ..tools.bio.sequence_validation import validate_sequence
from ..tools.export.errors import ExportError
from ..tools.export.json_export import export_history_json, history_filename
from ..tools.export.pdf_report import build_pdf_report, report_filename
from ..tools.viz.network_layout import compute_network_layout

logger = logging.getLogger(__name__)


class AnalysisInProgressError(RuntimeError):
    pass


class AppLogic:
    def __init__(
        self,
        state: Optional[AppState] = None,
        analyzer: Optional[SequenceAnalyzer] = None,
        chat_manager: Optional[ChatManager] = None,
    ) -> None:
        self.state = state or AppState()
        self.analyzer = analyzer or SequenceAnalyzer()
        self.chat_manager = chat_manager or ChatManager()

    # Sequence input

    def update_input(self, raw_text: str) -> Optional[SequenceValidation]:
        self.state.raw_input = raw_text or ""
        if not self.state.raw_input.strip():
            self.state.validation = None
        else:
            self.state.validation = validate_sequence(self.state.raw_input)
        return self.state.validation

    def import_file(self, data: bytes) -> Optional[SequenceValidation]:
        return self.update_input(read_sequence_file(data))

    def load_example(self, name: str) -> Optional[SequenceValidation]:
        example = self.get_example(name)
        if example is None:
            raise KeyError(f"Unknown example sequence: {name}")
        return self.update_input(example.sequence)

    def get_example(self, name: str) -> Optional[ExampleSequence]:
        return next((example for example in EXAMPLE_SEQUENCES if example.name == name), None)

    def get_examples(self) -> list[ExampleSequence]:
        return list(EXAMPLE_SEQUENCES)

    def get_sequence_stats(self) -> Optional[SequenceStats]:
        validation = self.state.validation
        if validation is None or not validation.is_valid:
            return None
        return get_sequence_stats(validation.cleaned_sequence)

    def can_analyze(self) -> bool:
        validation = self.state.validation
        return bool(validation and validation.is_valid and not self.state.is_analyzing)

    # Analysis

    def run_analysis(self) -> AnalysisResult:
        if self.state.is_analyzing:
            raise AnalysisInProgressError("An analysis is already running.")

        validation = self.state.validation
        if validation is None:
            validation = validate_sequence(self.state.raw_input)

        self.state.is_analyzing = True
        try:
            api_key = self.state.credentials.get_api_key()
            outcome = self.analyzer.analyze(validation, api_key)
            self.state.current = outcome
            result = self.state.notebook.record(validation.cleaned_sequence, outcome)
        finally:
            self.state.is_analyzing = False

        logger.info(
            f"Analysis complete: {len(outcome.predictions)} predictions, "
            f"{len(outcome.target_genes)} target genes ({outcome.source.value})"
        )
        return result

    def get_network_layout(self) -> Optional[NetworkLayout]:
        if self.state.current is None or not self.state.current.target_genes:
            return None
        return compute_network_layout(self.state.current.target_genes)

    # Chat

    def send_chat_message(self, text: str, kind: MessageKind = MessageKind.TEXT) -> Optional[ChatReply]:
        text = (text or "").strip()
        if not text:
            return None

        history = list(self.state.chat_messages)
        self.state.add_message(MessageRole.USER, text, kind)
        self.state.notebook.append_note(text)

        reply = self.chat_manager.get_chat_response(
            text,
            self.state.credentials.get_api_key(),
            analysis=self.state.notebook.latest,
            conversation_history=history,
        )
        self.state.add_message(MessageRole.ASSISTANT, reply.content)
        return reply

    def send_voice_message(self) -> Optional[ChatReply]:
        # No speech recognition backend; the recording yields a fixed transcript.
        return self.send_chat_message(SIMULATED_VOICE_TRANSCRIPT, MessageKind.VOICE)

    def get_conversation_summary(self) -> str:
        return self.chat_manager.get_conversation_summary(self.state.chat_messages)

    # Notebook and settings

    def clear_history(self) -> None:
        self.state.notebook.clear()

    def save_api_key(self, api_key: str) -> bool:
        if not (api_key or "").strip():
            return False
        self.state.credentials.set_api_key(api_key)
        return True

    def has_api_key(self) -> bool:
        return self.state.credentials.has_api_key()

    # Export

    def export_pdf(self) -> ExportResult:
        current = self.state.current
        filename = report_filename()
        if current is None:
            return ExportResult(
                success=False,
                filename=filename,
                mime_type="application/pdf",
                error="No data to export. Run an analysis first to generate a report.",
            )
        try:
            data = build_pdf_report(
                current.predictions,
                current.target_genes,
                current.hypotheses,
                is_fallback=current.is_fallback,
            )
        except ExportError as e:
            logger.error(f"PDF export failed: {e}")
            return ExportResult(success=False, filename=filename, mime_type="application/pdf", error=str(e))

        return ExportResult(success=True, filename=filename, mime_type="application/pdf", data=data)

    def export_history(self) -> ExportResult:
        filename = history_filename()
        try:
            data = export_history_json(self.state.notebook.analyses)
        except ExportError as e:
            logger.error(f"History export failed: {e}")
            return ExportResult(success=False, filename=filename, mime_type=CONTENT_TYPE_JSON, error=str(e))

        return ExportResult(success=True, filename=filename, mime_type=CONTENT_TYPE_JSON, data=data)
