"""Lesson plan session: the single owner of the document and its side states.

Everything the rendering layer reads comes from here: the current document,
one record per generated section, the idea flow, and the export flag. Every
mutation of the document goes through ``update_field`` or a section's
generation run.
"""

import sys
from functools import partial
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from lpb.config import get_config
from lpb.data.lesson_data import build_initial_lesson_plan
from lpb.document import FieldPath, set_in
from lpb.generation import SECTIONS, run_generation
from lpb.ideas import IdeaRequestFlow
from lpb.registry import SectionTaskRegistry
from lpb.state import Activity, ExportState
from lpb.utils.exporter import export_docx

Exporter = Callable[[dict], Awaitable[Any]]


class LessonPlanSession:
    def __init__(self, client, exporter: Exporter = export_docx, document: Optional[dict] = None):
        self.client = client
        self.exporter = exporter
        self.document: dict = document if document is not None else build_initial_lesson_plan()
        self.registry = SectionTaskRegistry(SECTIONS)
        self.ideas = IdeaRequestFlow(client)
        self.export_state: ExportState = {"running": False}
        self.triggers: dict[str, Callable[[], Awaitable[bool]]] = {
            section: partial(self.generate, section) for section in SECTIONS
        }

    # --- Field edits ---

    def update_field(self, path: FieldPath, value: Any) -> None:
        """Replace the field at ``path``; path errors propagate to the caller."""
        self.document = set_in(self.document, path, value)

    # --- Section generation ---

    async def generate(self, section: str) -> bool:
        """Run the section's generation. Returns True if a result was applied.

        With ``single_flight`` enabled, a trigger for a section that is
        already running is ignored.
        """
        if section not in SECTIONS:
            raise KeyError(f"Unknown section '{section}'.")
        if get_config().get("single_flight", False) and self.registry.is_running(section):
            print(f"[LPB] {section} is already generating; trigger ignored.", file=sys.stderr)
            return False
        return await run_generation(self, section)

    def trigger(self, section: str) -> Callable[[], Awaitable[bool]]:
        """Return the bound zero-argument trigger for ``section``."""
        return self.triggers[section]

    # --- Idea flow ---

    async def open_ideas(self, activity: Activity) -> None:
        await self.ideas.open(activity, self.document.get("class", ""))

    def close_ideas(self) -> None:
        self.ideas.close()

    # --- Export ---

    async def export(self) -> Optional[Path]:
        """Export the current document. Failures are logged, never raised.

        Returns whatever the exporter returns (the written path), or None on failure.
        """
        self.export_state = {"running": True}
        try:
            return await self.exporter(self.document)
        except Exception as exc:
            print(f"[LPB] Error exporting to DOCX: {exc!r}", file=sys.stderr)
            return None
        finally:
            self.export_state = {"running": False}

    # --- Upward view ---

    def view(self) -> dict:
        """Snapshot of everything the rendering layer displays."""
        return {
            "document": self.document,
            "sections": self.registry.snapshot(),
            "ideas": dict(self.ideas.state),
            "export": dict(self.export_state),
        }
