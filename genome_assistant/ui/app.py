import logging
from typing import Optional

import streamlit as st

from genome_assistant.constants.constants import *
from genome_assistant.core.analysis_service import InvalidSequenceError
from genome_assistant.models.analysis_models import AnalysisOutcome
from genome_assistant.models.chat_models import MessageKind
from genome_assistant.models.sequence_models import SequenceValidation
from genome_assistant.settings import settings
from genome_assistant.tools.bio.sequence_utils import format_sequence
from genome_assistant.tools.viz.network_layout import build_network_figure
from genome_assistant.ui.logic import AnalysisInProgressError, AppLogic

logging.basicConfig(level=settings.log_level, format="%(levelname)s:%(name)s:%(message)s", force=True)
logger = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, page_icon=APP_ICON, layout="wide")

    _initialize_session_state()
    app_logic: AppLogic = st.session_state.app_logic

    _render_header(app_logic)

    left, center, right = st.columns([3, 6, 3])
    with left:
        _render_sequence_input(app_logic)
        _render_chat_interface(app_logic)
    with center:
        _render_predictions(app_logic.state.current)
        _render_network(app_logic)
    with right:
        _render_hypotheses(app_logic.state.current)
        _render_notebook(app_logic)

    st.divider()
    st.caption(f"{APP_TITLE} • {APP_SUBTITLE}")
    st.caption("Powered by advanced AI for multimodal genomic analysis")


def _initialize_session_state() -> None:
    if "app_logic" not in st.session_state:
        st.session_state.app_logic = AppLogic()
    if "sequence_text" not in st.session_state:
        st.session_state.sequence_text = ""
    if "last_upload" not in st.session_state:
        st.session_state.last_upload = None


def _render_header(app_logic: AppLogic) -> None:
    title_col, action_col = st.columns([8, 2])
    with title_col:
        st.title(f"{APP_ICON} {APP_TITLE}")
    with action_col:
        if app_logic.has_api_key():
            st.success("AI Ready")
        else:
            st.warning("No API key")
        _render_api_key_settings(app_logic)


def _render_api_key_settings(app_logic: AppLogic) -> None:
    with st.popover("API Key"):
        st.markdown("Enter your Google Gemini API key to enable DNA sequence analysis.")
        with st.form("api_key_form", clear_on_submit=True):
            api_key = st.text_input("API Key", type="password", placeholder="AIza...")
            submitted = st.form_submit_button("Save")
        if submitted:
            if app_logic.save_api_key(api_key):
                st.success("Saved!")
            else:
                st.error("An API key is required for DNA analysis")
        st.markdown("[Get your API key from Google AI Studio](https://aistudio.google.com/app/apikey)")


def _render_sequence_input(app_logic: AppLogic) -> None:
    st.subheader("Sequence Input")

    uploaded_file = st.file_uploader(
        "Upload sequence file",
        type=UI_ACCEPTED_FILE_TYPES,
        help="Upload a FASTA or plain-text file; its contents replace the text below",
    )
    if uploaded_file is not None and uploaded_file.file_id != st.session_state.last_upload:
        st.session_state.last_upload = uploaded_file.file_id
        validation = app_logic.import_file(uploaded_file.getvalue())
        st.session_state.sequence_text = app_logic.state.raw_input
        logger.info(f"Loaded {uploaded_file.name} (valid={validation.is_valid if validation else False})")

    example_names = [example.name for example in app_logic.get_examples()]
    example = st.selectbox("Example sequences", ["-"] + example_names, index=0)
    if example != "-" and st.button("Load example"):
        app_logic.load_example(example)
        st.session_state.sequence_text = app_logic.state.raw_input
        st.rerun()

    sequence_text = st.text_area(
        "Paste your DNA sequence here (FASTA format supported)",
        key="sequence_text",
        height=UI_TEXTAREA_HEIGHT,
        placeholder=">sequence_name\nATCGATCG...",
    )
    validation = app_logic.update_input(sequence_text)

    if validation is not None:
        _display_validation(validation)
        stats = app_logic.get_sequence_stats()
        if stats is not None:
            st.caption(
                f"A: {stats.a_count} · T: {stats.t_count} · G: {stats.g_count} · C: {stats.c_count} "
                f"· AT: {stats.at_content}% · {stats.gc_assessment}"
            )
            with st.expander("Cleaned sequence"):
                st.code(format_sequence(validation.cleaned_sequence), language=None)

    _render_analyze_button(app_logic)


def _display_validation(validation: SequenceValidation) -> None:
    badges = []
    if validation.was_fasta:
        badges.append("FASTA detected")
    if validation.was_converted:
        badges.append("RNA → DNA converted")
    if badges:
        st.caption(" · ".join(badges))

    if validation.is_valid:
        st.success(f"Valid sequence: {validation.length:,} bp · GC {validation.gc_content}%")
    else:
        st.error(validation.error or UNKNOWN_ERROR)
        if validation.length:
            st.caption(f"{validation.length:,} bp · GC {validation.gc_content}%")

    if validation.invalid_characters:
        st.warning(f"Ignored characters: {', '.join(validation.invalid_characters)}")


def _render_analyze_button(app_logic: AppLogic) -> None:
    if st.button("Analyze", type="primary", disabled=not app_logic.can_analyze(), use_container_width=True):
        _run_analysis(app_logic)


def _run_analysis(app_logic: AppLogic) -> None:
    st.toast("Analysis Started: analyzing sequence patterns and predicting functions...")
    with st.spinner("Analyzing your sequence..."):
        try:
            result = app_logic.run_analysis()
        except (InvalidSequenceError, AnalysisInProgressError) as e:
            st.error(f"Analysis failed: {str(e)}")
            return

    outcome = app_logic.state.current
    if outcome is not None and outcome.is_fallback:
        st.warning(f"Analysis service unavailable ({outcome.error}). Showing demo data.")
    st.toast(
        f"Analysis Complete: found {len(result.predictions)} potential functions "
        f"with {len(result.target_genes)} target genes."
    )
    st.rerun()


def _source_caption(outcome: AnalysisOutcome) -> None:
    if outcome.is_fallback:
        st.caption("⚠️ Demo data, generated locally")
    else:
        st.caption("Model output")


def _render_predictions(outcome: Optional[AnalysisOutcome]) -> None:
    st.subheader("Function Predictions")
    if outcome is None or not outcome.predictions:
        st.info("Analyze a sequence to see predicted functions")
        return

    _source_caption(outcome)
    for pred in outcome.predictions:
        with st.expander(f"{pred.name} · {pred.confidence}%", expanded=pred is outcome.predictions[0]):
            st.progress(pred.confidence / 100)
            st.markdown(f"**Category:** {pred.category}")
            st.markdown(pred.mechanism)
            if pred.evidence:
                st.markdown("**Evidence**")
                st.markdown("\n".join(f"- {item}" for item in pred.evidence))
            if pred.disease_associations:
                st.markdown(f"**Disease Associations:** {', '.join(pred.disease_associations)}")


def _render_network(app_logic: AppLogic) -> None:
    st.subheader("Gene Regulatory Network")
    layout = app_logic.get_network_layout()
    if layout is None:
        st.info("Analyze a sequence to visualize the gene regulatory network")
        return

    st.plotly_chart(build_network_figure(layout), use_container_width=True)

    export = app_logic.export_pdf()
    if export.success:
        st.download_button("Export PDF", data=export.data, file_name=export.filename, mime=export.mime_type)
    else:
        st.error(f"Export Failed: {export.error}")


def _render_hypotheses(outcome: Optional[AnalysisOutcome]) -> None:
    st.subheader("Hypotheses")
    if outcome is None or not outcome.hypotheses:
        st.info("Hypotheses will appear after analysis")
        return

    _source_caption(outcome)
    for hyp in outcome.hypotheses:
        with st.expander(hyp.experiment_type):
            st.markdown(hyp.statement)
            st.markdown(f"**Experimental Approach:** {hyp.approach}")
            st.markdown(f"**Expected Outcome:** {hyp.expected_outcome}")
            st.markdown(f"**Resources:** {hyp.resources}")
            st.markdown(f"**Timeline:** {hyp.timeline}")


def _render_notebook(app_logic: AppLogic) -> None:
    st.subheader("Research Notebook")
    notebook = app_logic.state.notebook

    if notebook.is_empty():
        st.caption("Your analysis history will appear here. Each analysis is automatically saved.")
        return

    export = app_logic.export_history()
    export_col, clear_col = st.columns(2)
    with export_col:
        if export.success:
            st.download_button("Export JSON", data=export.data, file_name=export.filename, mime=export.mime_type)
        else:
            st.error(f"Export Failed: {export.error}")
    with clear_col:
        if st.button("Clear history"):
            app_logic.clear_history()
            st.toast("History Cleared: all analysis records have been removed.")
            st.rerun()

    for analysis in notebook.analyses:
        with st.container(border=True):
            st.markdown(f"**{analysis.sequence_type}** · {analysis.timestamp.strftime(NOTEBOOK_TIMESTAMP_FORMAT)}")
            st.code(f"{analysis.sequence[:SEQUENCE_PREVIEW_LENGTH]}...", language=None)
            st.caption(
                f"{len(analysis.predictions)} predictions · {len(analysis.target_genes)} genes · "
                f"{len(analysis.hypotheses)} hypotheses"
            )
            if analysis.notes:
                st.caption(f"{len(analysis.notes)} note(s)")


def _render_chat_interface(app_logic: AppLogic) -> None:
    st.subheader("Assistant")

    for message in app_logic.state.chat_messages:
        with st.chat_message(message.role.value):
            if message.kind is MessageKind.VOICE:
                st.caption("🎤 Voice")
            st.write(message.content)

    if st.button("🎤 Tap to speak"):
        with st.spinner("Processing..."):
            app_logic.send_voice_message()
        st.rerun()

    if prompt := st.chat_input("Type your observation..."):
        _handle_chat_input(app_logic, prompt)

    st.caption(app_logic.get_conversation_summary())


def _handle_chat_input(app_logic: AppLogic, prompt: str) -> None:
    with st.spinner("Thinking..."):
        reply = app_logic.send_chat_message(prompt)
    if reply is not None and reply.error:
        logger.info(f"Chat reply from fallback: {reply.error}")
    st.rerun()


if __name__ == "__main__":
    main()
