"""Gemini-backed generator for lesson plan sections and creative ideas.

One coroutine per section kind plus one for creative ideas. Each makes a
single model call. Text sections return the stripped answer; structured
sections decode JSON and validate its shape, raising ValueError when the
model answers with something else. Callers decide what a failure means.
"""

from langchain_google_genai import ChatGoogleGenerativeAI

from lpb.agents.prompts import (
    ANECDOTAL_RECORD_PROMPT,
    ASSESSMENT_STRATEGIES_PROMPT,
    CHECKLIST_PROMPT,
    CLOSING_ACTIVITIES_PROMPT,
    CORE_ACTIVITIES_PROMPT,
    CREATIVE_IDEAS_PROMPT,
    DIGITAL_UTILIZATION_PROMPT,
    INTERDISCIPLINARY_PROMPT,
    LEARNING_ENVIRONMENT_PROMPT,
    LEARNING_OBJECTIVES_PROMPT,
    LEARNING_PARTNERSHIP_PROMPT,
    OPENING_ACTIVITIES_PROMPT,
    PEDAGOGICAL_PRACTICES_PROMPT,
    SYSTEM_PROMPT,
)
from lpb.config import get_config
from lpb.utils.guidance import load_guidance
from lpb.utils.parsing import parse_json_response, response_text

ASSESSMENT_FIELDS = ("awal", "proses", "akhir")
ANECDOTE_FIELDS = ("studentName", "date", "observation", "followUp")


def _format_activities(activities) -> str:
    """Render core activities for a prompt; accepts the stored list or plain text."""
    if not activities:
        return "-"
    if isinstance(activities, str):
        return activities
    lines = []
    for i, activity in enumerate(activities, 1):
        if isinstance(activity, dict):
            lines.append(f"{i}. {activity.get('title', '')}: {activity.get('description', '')}")
        else:
            lines.append(f"{i}. {activity}")
    return "\n".join(lines)


def _validate_titled_items(data, what: str) -> list[dict]:
    """Validate a JSON array of {title, description} records."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of {what}, got {type(data).__name__}.")
    items = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or not item.get("title"):
            raise ValueError(f"{what.capitalize()} {i} is missing a title.")
        items.append({
            "title": str(item["title"]).strip(),
            "description": str(item.get("description", "")).strip(),
        })
    return items


def _validate_assessment(data) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for assessment, got {type(data).__name__}.")
    missing = [f for f in ASSESSMENT_FIELDS if f not in data]
    if missing:
        raise ValueError(f"Assessment response missing fields: {missing}")
    return {f: str(data[f]).strip() for f in ASSESSMENT_FIELDS}


def _validate_anecdote(data) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for anecdotal record, got {type(data).__name__}.")
    if not data.get("observation"):
        raise ValueError("Anecdotal record missing 'observation'.")
    # Optional fields default to empty so the record always has the table columns
    return {f: str(data.get(f, "")).strip() for f in ANECDOTE_FIELDS}


def _validate_checklist(data) -> list[dict]:
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array for checklist, got {type(data).__name__}.")
    items = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or not item.get("aspect"):
            raise ValueError(f"Checklist item {i} is missing 'aspect'.")
        # Keep any extra keys (including a raw "no"); numbering happens on apply
        items.append({**item, "aspect": str(item["aspect"]).strip(),
                      "indicator": str(item.get("indicator", "")).strip()})
    return items


class GeminiLessonClient:
    """Remote generation client for every generated part of a lesson plan."""

    def __init__(self, model: str | None = None, temperature: float | None = None):
        config = get_config()
        self.model_name = model or config["generation_model"]
        self.temperature = temperature if temperature is not None else config.get("temperature", 0.7)
        self.idea_count = config.get("idea_count", 3)
        self._llm = ChatGoogleGenerativeAI(model=self.model_name, temperature=self.temperature)

    def _system_content(self) -> str:
        system_content = SYSTEM_PROMPT
        guidance = load_guidance()
        if guidance:
            system_content += f"\n\n## Prinsip Pembelajaran Mendalam\n{guidance}"
        return system_content

    async def _ask(self, user_prompt: str):
        messages = [
            {"role": "system", "content": self._system_content()},
            {"role": "user", "content": user_prompt},
        ]
        return await self._llm.ainvoke(messages)

    async def _ask_text(self, user_prompt: str) -> str:
        text = response_text(await self._ask(user_prompt)).strip()
        if not text:
            raise ValueError("Model returned an empty response.")
        return text

    async def _ask_json(self, user_prompt: str):
        return parse_json_response(await self._ask(user_prompt))

    # --- Design ---

    async def generate_learning_objectives(self, capaian: str, class_info: str) -> str:
        return await self._ask_text(
            LEARNING_OBJECTIVES_PROMPT.format(capaian=capaian or "-", class_info=class_info)
        )

    async def generate_interdisciplinary_studies(self, topic: str, class_info: str) -> str:
        return await self._ask_text(INTERDISCIPLINARY_PROMPT.format(topic=topic, class_info=class_info))

    async def generate_pedagogical_practices(self, topic: str, class_info: str) -> str:
        return await self._ask_text(PEDAGOGICAL_PRACTICES_PROMPT.format(topic=topic, class_info=class_info))

    async def generate_learning_partnership(self, topic: str, class_info: str) -> str:
        return await self._ask_text(LEARNING_PARTNERSHIP_PROMPT.format(topic=topic, class_info=class_info))

    async def generate_learning_environment(self, topic: str, class_info: str) -> str:
        return await self._ask_text(LEARNING_ENVIRONMENT_PROMPT.format(topic=topic, class_info=class_info))

    async def generate_digital_utilization(self, topic: str, class_info: str) -> str:
        return await self._ask_text(DIGITAL_UTILIZATION_PROMPT.format(topic=topic, class_info=class_info))

    # --- Learning experience ---

    async def generate_opening_activities(self, topic: str, class_info: str) -> str:
        return await self._ask_text(OPENING_ACTIVITIES_PROMPT.format(topic=topic, class_info=class_info))

    async def generate_core_activities(self, topic: str, class_info: str, objectives: str) -> list[dict]:
        data = await self._ask_json(
            CORE_ACTIVITIES_PROMPT.format(topic=topic, class_info=class_info, objectives=objectives or "-")
        )
        return _validate_titled_items(data, "activities")

    async def generate_closing_activities(self, topic: str, class_info: str) -> str:
        return await self._ask_text(CLOSING_ACTIVITIES_PROMPT.format(topic=topic, class_info=class_info))

    # --- Assessment ---

    async def generate_assessment_strategies(self, topic: str, class_info: str, objectives: str) -> dict:
        data = await self._ask_json(
            ASSESSMENT_STRATEGIES_PROMPT.format(topic=topic, class_info=class_info, objectives=objectives or "-")
        )
        return _validate_assessment(data)

    async def generate_anecdotal_record(self, topic: str, objectives: str, activities) -> dict:
        data = await self._ask_json(
            ANECDOTAL_RECORD_PROMPT.format(
                topic=topic, objectives=objectives or "-", activities=_format_activities(activities)
            )
        )
        return _validate_anecdote(data)

    async def generate_checklist_data(self, topic: str, objectives: str, activities) -> list[dict]:
        data = await self._ask_json(
            CHECKLIST_PROMPT.format(
                topic=topic, objectives=objectives or "-", activities=_format_activities(activities)
            )
        )
        return _validate_checklist(data)

    # --- Creative ideas ---

    async def generate_creative_ideas(self, title: str, description: str, class_info: str) -> list[dict]:
        data = await self._ask_json(
            CREATIVE_IDEAS_PROMPT.format(
                count=self.idea_count, title=title, description=description or "-", class_info=class_info
            )
        )
        return _validate_titled_items(data, "ideas")

