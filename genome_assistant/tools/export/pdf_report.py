import io
import logging
from datetime import datetime
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.graphics.shapes import Circle, Drawing, Line, String
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...constants.constants import *
from ...models.analysis_models import FunctionPrediction, Hypothesis, TargetGene
from .errors import ExportError
from ..viz.network_layout import compute_network_layout, edge_width, relationship_color

logger = logging.getLogger(__name__)

PRIMARY = colors.HexColor("#1e40af")
NETWORK_PURPLE = colors.HexColor("#7c3aed")
HYPOTHESIS_GREEN = colors.HexColor("#15803d")
MUTED_TEXT = colors.HexColor("#3c3c3c")


class NumberedCanvas(canvas.Canvas):
    """Canvas that stamps "Page i of n" once the page count is known."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(page_count)
            super().showPage()
        super().save()

    def _draw_footer(self, page_count: int) -> None:
        width, _ = self._pagesize
        self.setFont("Helvetica", 8)
        self.setFillColor(colors.grey)
        self.drawCentredString(width / 2, 20, f"Page {self._pageNumber} of {page_count}")
        self.drawString(56, 20, REPORT_FOOTER_TEXT)


def report_filename(today: Optional[datetime] = None) -> str:
    return PDF_FILENAME_TEMPLATE.format(date=(today or datetime.now()).strftime("%Y-%m-%d"))


def confidence_color(confidence: int) -> colors.Color:
    if confidence >= CONFIDENCE_HIGH_THRESHOLD:
        return colors.HexColor("#22c55e")
    if confidence >= CONFIDENCE_MEDIUM_THRESHOLD:
        return colors.HexColor("#3b82f6")
    if confidence >= CONFIDENCE_LOW_THRESHOLD:
        return colors.HexColor("#eab308")
    return colors.HexColor("#9ca3af")


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("ReportTitle", parent=base["Heading1"], fontSize=22, textColor=PRIMARY),
        "subtitle": ParagraphStyle("ReportSubtitle", parent=base["Normal"], fontSize=9, textColor=colors.grey),
        "section": ParagraphStyle("Section", parent=base["Heading2"], fontSize=14, textColor=colors.white),
        "card_title": ParagraphStyle("CardTitle", parent=base["Heading3"], fontSize=12, textColor=PRIMARY),
        "hyp_title": ParagraphStyle("HypTitle", parent=base["Heading3"], fontSize=11, textColor=HYPOTHESIS_GREEN),
        "body": ParagraphStyle("Body", parent=base["Normal"], fontSize=10, textColor=MUTED_TEXT, leading=13),
        "small": ParagraphStyle("Small", parent=base["Normal"], fontSize=9, textColor=MUTED_TEXT, leading=11),
        "note": ParagraphStyle("Note", parent=base["Normal"], fontSize=9, textColor=colors.HexColor("#b45309")),
    }


def _para(text: str, style: ParagraphStyle) -> Paragraph:
    return Paragraph(escape(str(text)), style)


def _section_header(title: str, background: colors.Color, st: dict, width: float) -> Table:
    header = Table([[_para(title, st["section"])]], colWidths=[width])
    header.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), background),
                ("LEFTPADDING", (0, 0), (-1, -1), 6),
                ("TOPPADDING", (0, 0), (-1, -1), 2),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
            ]
        )
    )
    return header


def _prediction_card(index: int, pred: FunctionPrediction, st: dict, width: float) -> KeepTogether:
    title_row = Table(
        [[_para(f"{index}. {pred.name}", st["card_title"]), _para(f"{pred.confidence}%", st["small"])]],
        colWidths=[width - 60, 60],
    )
    title_row.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (0, 0), colors.HexColor("#f8faff")),
                ("BACKGROUND", (1, 0), (1, 0), confidence_color(pred.confidence)),
                ("ALIGN", (1, 0), (1, 0), "CENTER"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )

    parts = [
        title_row,
        _para(f"Category: {pred.category}", st["small"]),
        _para(f"Mechanism: {pred.mechanism}", st["body"]),
    ]
    if pred.evidence:
        parts.append(Paragraph("<b>Evidence:</b>", st["body"]))
        parts.extend(_para(f"• {item}", st["small"]) for item in pred.evidence)
    if pred.disease_associations:
        parts.append(Paragraph("<b>Disease Associations:</b>", st["body"]))
        parts.append(_para(", ".join(pred.disease_associations), st["small"]))
    parts.append(Spacer(1, 10))
    return KeepTogether(parts)


def _network_drawing(target_genes: list[TargetGene]) -> Drawing:
    layout = compute_network_layout(target_genes)
    drawing = Drawing(NETWORK_CANVAS_WIDTH, NETWORK_CANVAS_HEIGHT)

    def flip(y: float) -> float:
        # Layout uses screen coordinates; reportlab's origin is bottom-left.
        return NETWORK_CANVAS_HEIGHT - y

    center = layout.center
    for node in layout.genes:
        drawing.add(
            Line(
                center.x,
                flip(center.y),
                node.x,
                flip(node.y),
                strokeColor=colors.HexColor(relationship_color(node.relationship)),
                strokeWidth=edge_width(node.strength),
            )
        )

    drawing.add(Circle(center.x, flip(center.y), NETWORK_CENTER_NODE_RADIUS, fillColor=PRIMARY, strokeColor=None))
    drawing.add(
        String(center.x, flip(center.y) - 3, center.label, fontSize=8, fillColor=colors.white, textAnchor="middle")
    )

    for node in layout.genes:
        fill = colors.HexColor(relationship_color(node.relationship))
        drawing.add(Circle(node.x, flip(node.y), NETWORK_GENE_NODE_RADIUS, fillColor=fill, strokeColor=None))
        drawing.add(
            String(node.x, flip(node.y) - 3, node.label, fontSize=7, fillColor=colors.white, textAnchor="middle")
        )

    return drawing


def _gene_table(target_genes: list[TargetGene], st: dict, width: float) -> Table:
    rows = [["Gene", "Relationship", "Strength", "Description"]]
    for gene in target_genes:
        description = gene.description
        if len(description) > PDF_GENE_DESCRIPTION_MAX_LENGTH:
            description = description[:PDF_GENE_DESCRIPTION_MAX_LENGTH].rstrip() + "..."
        rows.append(
            [
                gene.name,
                gene.relationship,
                f"{round(gene.strength * 100)}%",
                _para(description, st["small"]),
            ]
        )

    table = Table(rows, colWidths=[width * 0.2, width * 0.2, width * 0.15, width * 0.45], repeatRows=1)
    style = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#f0f0fa")),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("TEXTCOLOR", (0, 1), (0, -1), PRIMARY),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
    for row, gene in enumerate(target_genes, start=1):
        style.append(("TEXTCOLOR", (1, row), (1, row), colors.HexColor(relationship_color(gene.relationship))))
        if row % 2 == 1:
            style.append(("BACKGROUND", (0, row), (-1, row), colors.HexColor("#f8f8fc")))
    table.setStyle(TableStyle(style))
    return table


def _hypothesis_card(index: int, hyp: Hypothesis, st: dict) -> KeepTogether:
    return KeepTogether(
        [
            _para(f"Hypothesis {index}: {hyp.experiment_type}", st["hyp_title"]),
            _para(hyp.statement, st["body"]),
            Paragraph("<b>Experimental Approach:</b>", st["body"]),
            _para(hyp.approach, st["small"]),
            Paragraph("<b>Expected Outcome:</b>", st["body"]),
            _para(hyp.expected_outcome, st["small"]),
            Paragraph(
                f"<b>Resources:</b> {escape(hyp.resources)} &nbsp;&nbsp; <b>Timeline:</b> {escape(hyp.timeline)}",
                st["small"],
            ),
            Spacer(1, 12),
        ]
    )


def build_pdf_report(
    predictions: list[FunctionPrediction],
    target_genes: list[TargetGene],
    hypotheses: list[Hypothesis],
    is_fallback: bool = False,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render the analysis as a paginated PDF and return its bytes."""
    if not predictions:
        raise ExportError("No data to export. Run an analysis first to generate a report.")

    generated_at = generated_at or datetime.now()
    buffer = io.BytesIO()
    margin = 56
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=margin,
        rightMargin=margin,
        topMargin=margin,
        bottomMargin=margin,
        title="DNA Sequence Analysis Report",
    )
    width = A4[0] - 2 * margin
    st = _styles()

    story = [
        _para("DNA Sequence Analysis Report", st["title"]),
        _para(
            f"Generated: {generated_at.strftime('%Y-%m-%d')} at {generated_at.strftime('%H:%M:%S')}",
            st["subtitle"],
        ),
        Spacer(1, 10),
        Paragraph("<b>Analysis Summary</b>", st["body"]),
        _para(
            f"{len(predictions)} Function Predictions  |  {len(target_genes)} Target Genes  |  "
            f"{len(hypotheses)} Hypotheses",
            st["body"],
        ),
    ]
    if is_fallback:
        story.append(
            _para("Demo data: the analysis service was unavailable and these results were generated locally.", st["note"])
        )
    story.append(Spacer(1, 14))

    story.append(_section_header("Function Predictions", PRIMARY, st, width))
    story.append(Spacer(1, 8))
    for index, pred in enumerate(predictions, start=1):
        story.append(_prediction_card(index, pred, st, width))

    story.append(_section_header("Regulatory Network - Target Genes", NETWORK_PURPLE, st, width))
    story.append(Spacer(1, 8))
    if target_genes:
        story.append(_network_drawing(target_genes))
        story.append(Spacer(1, 8))
        story.append(_gene_table(target_genes, st, width))
    else:
        story.append(_para("No target genes were returned.", st["small"]))
    story.append(Spacer(1, 14))

    story.append(_section_header("Research Hypotheses", colors.HexColor("#22c55e"), st, width))
    story.append(Spacer(1, 8))
    for index, hyp in enumerate(hypotheses, start=1):
        story.append(_hypothesis_card(index, hyp, st))

    try:
        doc.build(story, canvasmaker=NumberedCanvas)
    except Exception as e:
        logger.error(f"PDF export error: {e}")
        raise ExportError(f"Could not generate PDF report: {e}") from e

    pdf_bytes = buffer.getvalue()
    logger.info(f"Generated PDF report ({len(pdf_bytes):,} bytes)")
    return pdf_bytes
