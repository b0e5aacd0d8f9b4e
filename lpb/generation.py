"""Section generation: the dispatch table of generated sections and its driver.

Each section is one row binding an argument extractor, a generator coroutine
name on the remote client, an applicator that writes the result into the
document, and the message shown when generation fails. Adding a generated
section means adding a row.
"""

import asyncio
import sys
from typing import TYPE_CHECKING, Any, Callable, Iterable, NamedTuple

from lpb.document import get_in, set_in

if TYPE_CHECKING:
    from lpb.session import LessonPlanSession


class GenerationTask(NamedTuple):
    section: str
    generator: str  # Coroutine method name on the remote client.
    get_args: Callable[[dict], list]
    apply: Callable[[Any, dict], dict]  # (result, current document) -> new document
    error_message: str


def _field(document: dict, *path, default=""):
    """Read a field for a prompt; a missing branch yields the default."""
    try:
        value = get_in(document, path)
    except (KeyError, IndexError, TypeError):
        return default
    return default if value is None else value


def _topic_and_class(document: dict) -> list:
    return [_field(document, "topic"), _field(document, "class")]


def _write(path: list) -> Callable[[Any, dict], dict]:
    """Applicator that replaces one field with the result."""
    def apply(result, document):
        return set_in(document, path, result)
    return apply


def _apply_assessment(result, document):
    for phase in ("awal", "proses", "akhir"):
        document = set_in(document, ["assessment", phase], result[phase])
    return document


def _apply_anecdote(result, document):
    # Appends to the records present when the result arrives, not when the call began
    records = list(get_in(document, ["assessment", "anecdotalRecords"]))
    return set_in(document, ["assessment", "anecdotalRecords"], records + [result])


def _apply_checklist(result, document):
    numbered = [{**item, "no": i + 1} for i, item in enumerate(result)]
    return set_in(document, ["assessment", "checklist"], numbered)


_TASKS = [
    GenerationTask(
        "objectives",
        "generate_learning_objectives",
        lambda d: [_field(d, "design", "capaianPembelajaran"), _field(d, "class")],
        _write(["design", "tujuanPembelajaran"]),
        "Gagal membuat tujuan pembelajaran. Silakan coba lagi.",
    ),
    GenerationTask(
        "interdisciplinary",
        "generate_interdisciplinary_studies",
        _topic_and_class,
        _write(["design", "lintasDisiplinIlmu"]),
        "Gagal membuat Lintas Disiplin Ilmu. Silakan coba lagi.",
    ),
    GenerationTask(
        "pedagogy",
        "generate_pedagogical_practices",
        _topic_and_class,
        _write(["design", "praktikPedagogis"]),
        "Gagal membuat Praktik Pedagogis. Coba lagi.",
    ),
    GenerationTask(
        "partnership",
        "generate_learning_partnership",
        _topic_and_class,
        _write(["design", "kemitraanPembelajaran"]),
        "Gagal membuat Kemitraan Pembelajaran. Coba lagi.",
    ),
    GenerationTask(
        "environment",
        "generate_learning_environment",
        _topic_and_class,
        _write(["design", "lingkunganPembelajaran"]),
        "Gagal membuat Lingkungan Pembelajaran. Coba lagi.",
    ),
    GenerationTask(
        "digital",
        "generate_digital_utilization",
        _topic_and_class,
        _write(["design", "pemanfaatanDigital"]),
        "Gagal membuat Pemanfaatan Digital. Coba lagi.",
    ),
    GenerationTask(
        "opening",
        "generate_opening_activities",
        _topic_and_class,
        _write(["experience", "awal"]),
        "Gagal merancang kegiatan pembuka. Silakan coba lagi.",
    ),
    GenerationTask(
        "activities",
        "generate_core_activities",
        lambda d: _topic_and_class(d) + [_field(d, "design", "tujuanPembelajaran")],
        _write(["experience", "inti"]),
        "Gagal merancang kegiatan inti. Silakan coba lagi.",
    ),
    GenerationTask(
        "closing",
        "generate_closing_activities",
        _topic_and_class,
        _write(["experience", "penutup"]),
        "Gagal merancang kegiatan penutup. Silakan coba lagi.",
    ),
    GenerationTask(
        "assessment",
        "generate_assessment_strategies",
        lambda d: _topic_and_class(d) + [_field(d, "design", "tujuanPembelajaran")],
        _apply_assessment,
        "Gagal merancang strategi asesmen. Silakan coba lagi.",
    ),
    GenerationTask(
        "anecdote",
        "generate_anecdotal_record",
        lambda d: [
            _field(d, "topic"),
            _field(d, "design", "tujuanPembelajaran"),
            _field(d, "experience", "inti", default=[]),
        ],
        _apply_anecdote,
        "Gagal membuat catatan AI. Silakan coba lagi.",
    ),
    GenerationTask(
        "checklist",
        "generate_checklist_data",
        lambda d: [
            _field(d, "topic"),
            _field(d, "design", "tujuanPembelajaran"),
            _field(d, "experience", "inti", default=[]),
        ],
        _apply_checklist,
        "Gagal membuat data ceklis AI. Silakan coba lagi.",
    ),
]

SECTIONS: dict[str, GenerationTask] = {task.section: task for task in _TASKS}

# Later stages read what earlier stages wrote (objectives feed activities and
# assessment; activities feed anecdote and checklist).
GENERATION_STAGES: list[list[str]] = [
    ["objectives"],
    ["interdisciplinary", "pedagogy", "partnership", "environment", "digital", "opening", "closing"],
    ["activities", "assessment"],
    ["anecdote", "checklist"],
]


async def run_generation(session: "LessonPlanSession", section: str) -> bool:
    """Drive one section through begin, remote call, and succeed or fail.

    The document is read for arguments before the call and read again when
    the result arrives, so results of other sections that landed in between
    are kept. Remote failures, and results the section cannot apply, are
    recorded on the section, never raised.

    Returns True if the result was applied.
    """
    task = SECTIONS[section]
    session.registry.begin(section)

    args = task.get_args(session.document)
    generate = getattr(session.client, task.generator)

    try:
        result = await generate(*args)
        # A result the applicator cannot use fails the section
        updated = task.apply(result, session.document)
    except Exception as exc:
        print(f"[LPB] Error generating {section}: {exc!r}", file=sys.stderr)
        session.registry.fail(section, task.error_message)
        return False

    session.document = updated
    session.registry.succeed(section)
    return True


async def run_stages(session: "LessonPlanSession", sections: Iterable[str] | None = None) -> dict[str, bool]:
    """Generate the requested sections stage by stage.

    Sections inside a stage run concurrently. Defaults to every section.

    Returns {section: applied} for each section that ran.
    """
    requested = set(SECTIONS) if sections is None else set(sections)
    unknown = requested - set(SECTIONS)
    if unknown:
        raise ValueError(f"Unknown sections: {sorted(unknown)}")

    outcomes = {}
    for stage in GENERATION_STAGES:
        batch = [s for s in stage if s in requested]
        if not batch:
            continue
        results = await asyncio.gather(*(session.generate(s) for s in batch))
        outcomes.update(zip(batch, results))
    return outcomes
