"""Lesson plan document shape and path-addressed updates.

The document is a plain nested dict/list value. It is never edited in place:
``set_in`` copies every container along the path and shares everything else,
so a previously read document keeps its contents after an update.
"""

from typing import Any, Sequence, TypedDict, Union

from lpb.state import Activity

FieldPath = Sequence[Union[str, int]]


class AnecdotalRecord(TypedDict):
    studentName: str
    date: str
    observation: str
    followUp: str


class ChecklistItem(TypedDict):
    no: int
    aspect: str
    indicator: str


class Design(TypedDict):
    capaianPembelajaran: str
    tujuanPembelajaran: str
    lintasDisiplinIlmu: str
    praktikPedagogis: str
    kemitraanPembelajaran: str
    lingkunganPembelajaran: str
    pemanfaatanDigital: str


class Experience(TypedDict):
    awal: str
    inti: list[Activity]
    penutup: str


class Assessment(TypedDict):
    awal: str
    proses: str
    akhir: str
    anecdotalRecords: list[AnecdotalRecord]
    checklist: list[ChecklistItem]


# "class" is a keyword, so the functional TypedDict form is required here.
LessonPlan = TypedDict(
    "LessonPlan",
    {
        "teacherName": str,
        "school": str,
        "subject": str,
        "topic": str,
        "class": str,
        "duration": str,
        "design": Design,
        "experience": Experience,
        "assessment": Assessment,
    },
)


def _step(container: Any, key: Union[str, int], path: FieldPath) -> Any:
    """Resolve one non-final path element, raising on anything but an existing branch."""
    if isinstance(container, dict):
        if key not in container:
            raise KeyError(f"Field path {list(path)!r} has no branch at {key!r}.")
        return container[key]
    if isinstance(container, list):
        if not isinstance(key, int) or isinstance(key, bool):
            raise TypeError(f"Field path {list(path)!r} uses {key!r} to index a list.")
        return container[key]
    raise TypeError(
        f"Field path {list(path)!r} descends into a {type(container).__name__} at {key!r}."
    )


def get_in(document: Any, path: FieldPath) -> Any:
    """Return the value addressed by ``path``. An empty path returns the document."""
    current = document
    for key in path:
        current = _step(current, key, path)
    return current


def _replace(container: Any, key: Union[str, int], value: Any, path: FieldPath) -> Any:
    """Return a shallow copy of ``container`` with ``key`` set to ``value``."""
    if isinstance(container, dict):
        updated = dict(container)
        updated[key] = value
        return updated
    if isinstance(container, list):
        if not isinstance(key, int) or isinstance(key, bool):
            raise TypeError(f"Field path {list(path)!r} uses {key!r} to index a list.")
        updated = list(container)
        if key == len(updated):
            updated.append(value)
        else:
            updated[key] = value
        return updated
    raise TypeError(
        f"Field path {list(path)!r} cannot set {key!r} on a {type(container).__name__}."
    )


def set_in(document: Any, path: FieldPath, value: Any) -> Any:
    """Return a new document with the branch at ``path`` replaced by ``value``.

    Containers along the path are copied; every other branch is shared with
    ``document``. A list index equal to the list length appends.

    Raises:
        ValueError: ``path`` is empty.
        KeyError / IndexError / TypeError: a non-final element does not resolve
            to an existing dict or list. These are programming errors.
    """
    if not path:
        raise ValueError("Field path must contain at least one key.")

    # Walk down, remembering each container so it can be copied on the way back up.
    containers = [document]
    for key in path[:-1]:
        containers.append(_step(containers[-1], key, path))

    new_value = value
    for container, key in zip(reversed(containers), reversed(path)):
        new_value = _replace(container, key, new_value, path)
    return new_value
