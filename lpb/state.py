"""Session state records: the shapes the rendering layer reads."""

from typing import Literal, Optional, TypedDict


class Activity(TypedDict):
    title: str
    description: str


class GeneratedIdea(TypedDict):
    title: str
    description: str


class SectionState(TypedDict):
    running: bool  # True while the section's remote call is in flight.
    error_message: Optional[str]  # Fixed failure message of the last attempt, else None.


class IdeaFlowState(TypedDict):
    phase: Literal["closed", "opening", "loaded", "errored"]
    open: bool
    selected_activity: Optional[Activity]
    results: list[GeneratedIdea]
    running: bool
    error_message: Optional[str]


class ExportState(TypedDict):
    running: bool  # Advisory only; a second export is not blocked.


def idle_section_state() -> SectionState:
    return {"running": False, "error_message": None}


def closed_idea_state() -> IdeaFlowState:
    return {
        "phase": "closed",
        "open": False,
        "selected_activity": None,
        "results": [],
        "running": False,
        "error_message": None,
    }
