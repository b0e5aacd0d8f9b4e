"""Document exporter: renders the lesson plan document into a DOCX file."""

import asyncio
import re
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from lpb.config import get_config

IDENTITY_ROWS = [
    ("Nama Guru", "teacherName"),
    ("Satuan Pendidikan", "school"),
    ("Mata Pelajaran", "subject"),
    ("Kelas / Fase", "class"),
    ("Topik", "topic"),
    ("Alokasi Waktu", "duration"),
]

DESIGN_HEADINGS = [
    ("Capaian Pembelajaran", "capaianPembelajaran"),
    ("Tujuan Pembelajaran", "tujuanPembelajaran"),
    ("Lintas Disiplin Ilmu", "lintasDisiplinIlmu"),
    ("Praktik Pedagogis", "praktikPedagogis"),
    ("Kemitraan Pembelajaran", "kemitraanPembelajaran"),
    ("Lingkungan Pembelajaran", "lingkunganPembelajaran"),
    ("Pemanfaatan Digital", "pemanfaatanDigital"),
]

ASSESSMENT_HEADINGS = [
    ("Asesmen Awal", "awal"),
    ("Asesmen Proses", "proses"),
    ("Asesmen Akhir", "akhir"),
]

_EMPTY = "-"

# Project root (parent of lpb/); relative output paths are anchored here
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def _add_text(doc, text) -> None:
    """Add multi-line text as one paragraph per non-blank line."""
    lines = [line.strip() for line in str(text or "").splitlines() if line.strip()]
    if not lines:
        doc.add_paragraph(_EMPTY)
        return
    for line in lines:
        doc.add_paragraph(line)


def _add_table(doc, headers: list[str], rows: list[list]) -> None:
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = "Table Grid"
    for cell, header in zip(table.rows[0].cells, headers):
        cell.text = header
        for run in cell.paragraphs[0].runs:
            run.bold = True
    for row in rows:
        cells = table.add_row().cells
        for cell, value in zip(cells, row):
            cell.text = str(value if value not in (None, "") else _EMPTY)


def _render_docx(data: dict):
    """Convert the lesson plan document into a python-docx Document."""
    doc = Document()

    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    title = doc.add_heading("Perencanaan Pembelajaran", level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    # Identity
    _add_table(
        doc,
        ["Komponen", "Keterangan"],
        [[label, data.get(key, "")] for label, key in IDENTITY_ROWS],
    )

    # Design
    design = data.get("design", {})
    doc.add_heading("A. Desain Pembelajaran", level=1)
    for label, key in DESIGN_HEADINGS:
        doc.add_heading(label, level=2)
        _add_text(doc, design.get(key, ""))

    # Learning experience
    experience = data.get("experience", {})
    doc.add_heading("B. Pengalaman Belajar", level=1)
    doc.add_heading("Kegiatan Awal", level=2)
    _add_text(doc, experience.get("awal", ""))

    doc.add_heading("Kegiatan Inti", level=2)
    activities = experience.get("inti") or []
    if isinstance(activities, str):
        _add_text(doc, activities)
    elif not activities:
        doc.add_paragraph(_EMPTY)
    else:
        for activity in activities:
            p = doc.add_paragraph(style="List Number")
            run = p.add_run(activity.get("title", ""))
            run.bold = True
            description = activity.get("description", "")
            if description:
                p.add_run(f" {description}")

    doc.add_heading("Kegiatan Penutup", level=2)
    _add_text(doc, experience.get("penutup", ""))

    # Assessment
    assessment = data.get("assessment", {})
    doc.add_heading("C. Asesmen Pembelajaran", level=1)
    for label, key in ASSESSMENT_HEADINGS:
        doc.add_heading(label, level=2)
        _add_text(doc, assessment.get(key, ""))

    records = assessment.get("anecdotalRecords") or []
    if records:
        doc.add_heading("Catatan Anekdot", level=2)
        _add_table(
            doc,
            ["Nama Siswa", "Tanggal", "Peristiwa", "Tindak Lanjut"],
            [
                [r.get("studentName"), r.get("date"), r.get("observation"), r.get("followUp")]
                for r in records
            ],
        )

    checklist = assessment.get("checklist") or []
    if checklist:
        doc.add_heading("Lembar Ceklis Observasi", level=2)
        _add_table(
            doc,
            ["No", "Aspek", "Indikator", "Ya", "Tidak"],
            [[item.get("no"), item.get("aspect"), item.get("indicator"), "", ""] for item in checklist],
        )

    return doc


def _slugify(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def resolve_output_path() -> Path:
    """Return the configured DOCX output path, anchored at the project root."""
    configured = Path(get_config().get("output_path", "./output/rencana-pembelajaran.docx"))
    if configured.is_absolute():
        return configured
    return _PROJECT_ROOT / configured


def write_docx(data: dict, output_path: Path | None = None) -> Path:
    """Write the lesson plan as DOCX under the configured output directory.

    The file is named after the lesson topic; an existing file is never
    overwritten, a numbered name is picked instead.

    Returns the Path to the written file.
    """
    base_path = output_path or resolve_output_path()
    output_dir = base_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    stem = _slugify(str(data.get("topic", ""))) or base_path.stem

    # Find a non-conflicting filename
    target = output_dir / f"{stem}.docx"
    counter = 1
    while target.exists():
        counter += 1
        target = output_dir / f"{stem} ({counter}).docx"

    _render_docx(data).save(str(target))
    return target


async def export_docx(data: dict) -> Path:
    """Async exporter entry point; the DOCX encoder runs in a worker thread."""
    return await asyncio.to_thread(write_docx, data)
