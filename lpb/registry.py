"""Per-section generation state: one independent record per section."""

from typing import Iterable

from lpb.state import SectionState, idle_section_state


class SectionTaskRegistry:
    """Holds a ``SectionState`` per section for a fixed set of sections.

    Every transition replaces the section's record with a fresh dict, so a
    record handed out earlier never changes underneath its reader and no
    write touches another section's record.
    """

    def __init__(self, sections: Iterable[str]):
        self._states: dict[str, SectionState] = {s: idle_section_state() for s in sections}

    def _check(self, section: str) -> None:
        if section not in self._states:
            raise KeyError(f"Unknown section '{section}'.")

    def begin(self, section: str) -> None:
        self._check(section)
        self._states[section] = {"running": True, "error_message": None}

    def succeed(self, section: str) -> None:
        self._check(section)
        self._states[section] = {"running": False, "error_message": None}

    def fail(self, section: str, message: str) -> None:
        self._check(section)
        self._states[section] = {"running": False, "error_message": message}

    def get(self, section: str) -> SectionState:
        self._check(section)
        return self._states[section]

    def is_running(self, section: str) -> bool:
        return self.get(section)["running"]

    @property
    def sections(self) -> list[str]:
        return list(self._states)

    def snapshot(self) -> dict[str, SectionState]:
        """Return a copy of all records, keyed by section."""
        return {section: dict(state) for section, state in self._states.items()}
