"""Entry point: validates input, generates lesson plan sections, exports DOCX."""

import asyncio
import sys

from lpb.agents.generator import GeminiLessonClient
from lpb.generation import GENERATION_STAGES, SECTIONS, run_stages
from lpb.session import LessonPlanSession
from lpb.utils.validator import validate_input


def _pop_option(args: list[str], flag: str) -> str | None:
    """Remove ``flag VALUE`` from args and return VALUE, or None if absent."""
    if flag not in args:
        return None
    i = args.index(flag)
    if i + 1 >= len(args):
        raise ValueError(f"{flag} requires a value.")
    value = args[i + 1]
    del args[i:i + 2]
    return value


def _parse_sections(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    sections = [s.strip() for s in raw.split(",") if s.strip()]
    unknown = [s for s in sections if s not in SECTIONS]
    if unknown:
        raise ValueError(
            f"Unknown sections: {', '.join(unknown)}. "
            f"Choose from: {', '.join(s for stage in GENERATION_STAGES for s in stage)}"
        )
    return sections


async def run(
    topic: str | None = None,
    class_info: str | None = None,
    sections: list[str] | None = None,
    export: bool = True,
    client=None,
) -> LessonPlanSession:
    """Generate the requested sections (all by default) and export the result.

    Args:
        topic: Overrides the seed lesson topic.
        class_info: Overrides the seed class / phase.
        sections: Section keys to generate. None generates every section.
        export: Write the DOCX file when done.
        client: Remote generation client. None builds a GeminiLessonClient.
    """
    session = LessonPlanSession(client or GeminiLessonClient())

    if topic is not None:
        session.update_field(["topic"], validate_input(topic, "Topic"))
    if class_info is not None:
        session.update_field(["class"], validate_input(class_info, "Class"))

    print(f"[LPB] Topic: {session.document['topic']} ({session.document['class']})")

    outcomes = await run_stages(session, sections)
    for section, applied in outcomes.items():
        state = session.registry.get(section)
        if applied:
            print(f"[LPB] {section}: done")
        else:
            print(f"[LPB] {section}: {state['error_message']}")

    failed = sum(1 for applied in outcomes.values() if not applied)
    print(f"[LPB] Sections generated: {len(outcomes) - failed}/{len(outcomes)}")

    if export:
        output_path = await session.export()
        if output_path is not None:
            print(f"[LPB] Output written to: {output_path}")

    return session


def main() -> None:
    """CLI entry point: topic as positional words, options as flags."""
    args = sys.argv[1:]
    export = True

    if "--no-export" in args:
        export = False
        args.remove("--no-export")

    try:
        class_info = _pop_option(args, "--class")
        sections = _parse_sections(_pop_option(args, "--only"))
    except ValueError as exc:
        print(f"[LPB] {exc}", file=sys.stderr)
        sys.exit(2)

    topic = " ".join(args) if args else None

    try:
        asyncio.run(run(topic, class_info=class_info, sections=sections, export=export))
    except ValueError as exc:
        print(f"[LPB] {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
