"""
PDF Generator for Resumes
Lays out a structured resume on A4 pages with a running vertical cursor and
stamps a "Page X of N" footer on every page once the page count is known.
"""
import io
import re
from pathlib import Path
from typing import Callable

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from resume_models import ContactInfo, StructuredResume

# All measurements are in points
MARGIN = 40
LINE_HEIGHT = 12
FONT_SIZES = {'H1': 22, 'H2': 12, 'P': 10, 'SMALL': 8}
COLORS = {'PRIMARY': '#0891b2', 'TEXT': '#334155', 'MUTED': '#64748b', 'LINE': '#cbd5e1'}
FONTS = {
    'normal': 'Helvetica',
    'bold': 'Helvetica-Bold',
    'italic': 'Helvetica-Oblique',
}
BULLET = '•  '
FOOTER_OFFSET = 20


def resume_filename(full_name: str) -> str:
    """Download name: runs of whitespace and path separators in the full name become underscores."""
    return re.sub(r'[\s/\\]+', '_', full_name) + "_Resume.pdf"


class FooterCanvas(canvas.Canvas):
    """
    Canvas that holds every finished page until save() so the footer can
    include the total page count.
    """

    def __init__(self, *args, footer_name: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.footer_name = footer_name
        self.page_count = 0
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            # restoring a page state also restores its stale attributes
            self.__dict__.update(state)
            self._draw_footer(page_count)
            super().showPage()
        self.page_count = page_count
        super().save()

    def _draw_footer(self, page_count):
        page_width = self._pagesize[0]
        self.setFont(FONTS['normal'], FONT_SIZES['SMALL'])
        self.setFillColor(HexColor(COLORS['MUTED']))
        footer_text = f"{self.footer_name} | Page {self._pageNumber} of {page_count}"
        self.drawCentredString(page_width / 2, FOOTER_OFFSET, footer_text)


class ResumePDFGenerator:
    """Generate a paginated resume PDF from a StructuredResume and contact header"""

    def __init__(self, pagesize=A4, margin: float = MARGIN):
        self.pagesize = pagesize
        self.page_width, self.page_height = pagesize
        self.margin = margin
        self.usable_width = self.page_width - margin * 2
        self.page_count = 0
        self._canvas = None
        self._y = margin
        self._font = (FONTS['normal'], FONT_SIZES['P'])
        self._color = COLORS['TEXT']

    def build(self, resume: StructuredResume, contact: ContactInfo) -> bytes:
        """
        Lay out the resume and return the PDF bytes.

        Args:
            resume: Structured resume returned by the model
            contact: Header fields from the submitted form

        Returns:
            bytes: The finished PDF document
        """
        buffer = io.BytesIO()
        self._canvas = FooterCanvas(buffer, pagesize=self.pagesize, footer_name=contact.full_name)
        self._canvas.setTitle(f"{contact.full_name} - Resume")
        self._canvas.setAuthor(contact.full_name)
        self._y = self.margin

        self._draw_header(contact)
        self._draw_section('Professional Summary', lambda: self._draw_summary(resume))
        self._draw_section('Experience', lambda: self._draw_experience(resume))
        self._draw_section('Education', lambda: self._draw_education(resume))
        self._draw_section('Projects', lambda: self._draw_projects(resume))
        if resume.has_additional_information:
            self._draw_section('Additional Information', lambda: self._draw_bullets(resume.additional_information))
        self._draw_section('Skills', lambda: self._draw_skills(resume))

        self._canvas.showPage()
        self._canvas.save()
        self.page_count = self._canvas.page_count
        print(f"  [pdf] Rendered {self.page_count} page(s) for {contact.full_name}")
        return buffer.getvalue()

    # --- cursor and page handling ---

    def _check_page_break(self, needed_height: float) -> None:
        # a unit taller than a page still starts at the top of the current one
        at_top = self._y <= self.margin
        if not at_top and self._y + needed_height > self.page_height - self.margin:
            self._canvas.showPage()
            self._y = self.margin
            # a fresh page starts with the default graphics state
            self._apply_style()

    def _baseline(self, offset: float = 0) -> float:
        """Convert the top-down cursor to reportlab's bottom-up coordinates."""
        return self.page_height - (self._y + offset)

    def _set_style(self, weight: str, size: int, color: str) -> None:
        self._font = (FONTS[weight], size)
        self._color = color
        self._apply_style()

    def _apply_style(self) -> None:
        self._canvas.setFont(*self._font)
        self._canvas.setFillColor(HexColor(self._color))

    def _wrap(self, text: str, width: float | None = None) -> list[str]:
        font_name, font_size = self._font
        return simpleSplit(text or "", font_name, font_size, width or self.usable_width)

    def _draw_lines(self, lines: list[str], x: float) -> None:
        for i, line in enumerate(lines):
            self._canvas.drawString(x, self._baseline(i * LINE_HEIGHT), line)

    # --- blocks ---

    def _draw_header(self, contact: ContactInfo) -> None:
        self._set_style('bold', FONT_SIZES['H1'], COLORS['TEXT'])
        self._canvas.drawCentredString(self.page_width / 2, self._baseline(), contact.full_name)
        self._y += 25

        self._set_style('normal', FONT_SIZES['P'], COLORS['MUTED'])
        contact_line = f"{contact.email} • {contact.phone} • {contact.linkedin}"
        self._canvas.drawCentredString(self.page_width / 2, self._baseline(), contact_line)
        self._y += 30

    def _draw_section(self, title: str, body: Callable[[], None]) -> None:
        self._check_page_break(40)
        self._set_style('bold', FONT_SIZES['H2'], COLORS['PRIMARY'])
        self._canvas.drawString(self.margin, self._baseline(), title.upper())
        self._canvas.setStrokeColor(HexColor(COLORS['LINE']))
        rule_y = self._baseline(3)
        self._canvas.line(self.margin, rule_y, self.page_width - self.margin, rule_y)
        self._y += 20

        self._set_style('normal', FONT_SIZES['P'], COLORS['TEXT'])
        body()
        self._y += 20

    def _draw_summary(self, resume: StructuredResume) -> None:
        lines = self._wrap(resume.summary)
        self._check_page_break(len(lines) * LINE_HEIGHT)
        self._draw_lines(lines, self.margin)
        self._y += len(lines) * LINE_HEIGHT

    def _draw_experience(self, resume: StructuredResume) -> None:
        for exp in resume.experience:
            self._check_page_break(60)
            self._set_style('bold', FONT_SIZES['P'], COLORS['TEXT'])
            self._canvas.drawString(self.margin, self._baseline(), exp.role)
            self._set_style('normal', FONT_SIZES['P'], COLORS['TEXT'])
            self._canvas.drawString(self.margin, self._baseline(12), f"{exp.company} | {exp.duration}")
            self._y += 28
            self._draw_bullets(exp.achievements)
            self._y += 10

    def _draw_bullets(self, items: list[str]) -> None:
        indent = 5
        for item in items:
            lines = self._wrap(f"{BULLET}{item}", self.usable_width - indent)
            self._check_page_break(len(lines) * LINE_HEIGHT + 4)
            self._draw_lines(lines, self.margin + indent)
            self._y += len(lines) * LINE_HEIGHT + 4

    def _draw_education(self, resume: StructuredResume) -> None:
        for edu in resume.education:
            detail_lines = []
            if edu.details:
                self._set_style('italic', FONT_SIZES['P'], COLORS['TEXT'])
                detail_lines = self._wrap(edu.details)
            self._check_page_break(max(40, 24 + len(detail_lines) * LINE_HEIGHT))
            self._set_style('bold', FONT_SIZES['P'], COLORS['TEXT'])
            self._canvas.drawString(self.margin, self._baseline(), f"{edu.degree} - {edu.year}")
            self._set_style('normal', FONT_SIZES['P'], COLORS['TEXT'])
            self._canvas.drawString(self.margin, self._baseline(12), edu.institution)
            self._y += 24
            if detail_lines:
                self._set_style('italic', FONT_SIZES['P'], COLORS['TEXT'])
                self._draw_lines(detail_lines, self.margin)
                self._y += len(detail_lines) * LINE_HEIGHT
                self._set_style('normal', FONT_SIZES['P'], COLORS['TEXT'])

    def _draw_projects(self, resume: StructuredResume) -> None:
        for proj in resume.projects:
            self._set_style('normal', FONT_SIZES['P'], COLORS['TEXT'])
            lines = self._wrap(proj.description)
            # title stays on the same page as its description
            self._check_page_break(max(40, 14 + len(lines) * LINE_HEIGHT + 8))
            self._set_style('bold', FONT_SIZES['P'], COLORS['TEXT'])
            self._canvas.drawString(self.margin, self._baseline(), proj.title)
            self._y += 14
            self._set_style('normal', FONT_SIZES['P'], COLORS['TEXT'])
            self._draw_lines(lines, self.margin)
            self._y += len(lines) * LINE_HEIGHT + 8

    def _draw_skills(self, resume: StructuredResume) -> None:
        lines = self._wrap('  •  '.join(resume.skills))
        self._check_page_break(len(lines) * LINE_HEIGHT)
        self._draw_lines(lines, self.margin)
        self._y += len(lines) * LINE_HEIGHT


def export_document(resume: StructuredResume, contact: ContactInfo) -> tuple[str, bytes]:
    """Build the resume PDF in memory; returns (download filename, PDF bytes)."""
    return resume_filename(contact.full_name), ResumePDFGenerator().build(resume, contact)


def generate_resume_pdf(resume: StructuredResume, contact: ContactInfo, output_dir: str | Path) -> Path:
    """Write the resume PDF into output_dir and return its path."""
    filename, data = export_document(resume, contact)
    output_path = Path(output_dir) / filename
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
