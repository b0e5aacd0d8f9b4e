"""Property-based tests for set_in and SectionTaskRegistry.

Paths are drawn from every branch and leaf of the seed lesson plan; registry
runs are arbitrary sequences of transitions across all sections.
"""

import copy

from hypothesis import given, strategies as st

from lpb.data.lesson_data import build_initial_lesson_plan
from lpb.document import get_in, set_in
from lpb.generation import SECTIONS
from lpb.registry import SectionTaskRegistry


def _all_paths(node, prefix=()):
    if isinstance(node, dict):
        children = node.items()
    elif isinstance(node, list):
        children = enumerate(node)
    else:
        return
    for key, child in children:
        path = prefix + (key,)
        yield path
        yield from _all_paths(child, path)


SEED_PATHS = sorted(_all_paths(build_initial_lesson_plan()), key=repr)

seed_paths = st.sampled_from(SEED_PATHS)
field_values = st.one_of(
    st.text(max_size=30),
    st.integers(),
    st.lists(st.text(max_size=10), max_size=3),
    st.dictionaries(st.text(min_size=1, max_size=8), st.text(max_size=10), max_size=3),
)
transitions = st.lists(
    st.tuples(
        st.sampled_from(sorted(SECTIONS)),
        st.sampled_from(["begin", "succeed", "fail"]),
        st.text(min_size=1, max_size=20),
    ),
    max_size=40,
)


@given(path=seed_paths, value=field_values)
def test_set_in_writes_value_at_path(path, value):
    updated = set_in(build_initial_lesson_plan(), list(path), value)
    assert get_in(updated, path) == value


@given(path=seed_paths, value=field_values)
def test_set_in_leaves_input_unchanged(path, value):
    document = build_initial_lesson_plan()
    before = copy.deepcopy(document)

    set_in(document, list(path), value)

    assert document == before


@given(path=seed_paths, value=field_values)
def test_set_in_shares_every_branch_off_path(path, value):
    document = build_initial_lesson_plan()
    updated = set_in(document, list(path), value)

    for depth in range(len(path)):
        old = get_in(document, path[:depth])
        new = get_in(updated, path[:depth])
        assert new is not old
        keys = old.keys() if isinstance(old, dict) else range(len(old))
        for key in keys:
            if key != path[depth]:
                assert new[key] is old[key]


@given(steps=transitions)
def test_registry_sections_evolve_independently(steps):
    registry = SectionTaskRegistry(SECTIONS)
    expected = {section: {"running": False, "error_message": None} for section in SECTIONS}

    for section, op, message in steps:
        untouched = {s: registry.get(s) for s in SECTIONS if s != section}
        if op == "fail":
            registry.fail(section, message)
            expected[section] = {"running": False, "error_message": message}
        else:
            getattr(registry, op)(section)
            expected[section] = {"running": op == "begin", "error_message": None}

        for other, record in untouched.items():
            assert registry.get(other) is record

    assert registry.snapshot() == expected
