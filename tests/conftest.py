"""Shared fixtures for the lesson plan builder test suite."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from lpb.data.lesson_data import build_initial_lesson_plan
from lpb.generation import SECTIONS
from lpb.session import LessonPlanSession


@pytest.fixture
def base_document():
    """Fresh seed lesson plan."""
    return build_initial_lesson_plan()


@pytest.fixture
def mock_config():
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "generation_model": "gemini-2.5-flash",
        "temperature": 0.7,
        "idea_count": 3,
        "output_path": "./output/rencana-pembelajaran.docx",
        "single_flight": False,
        "guidance_enabled": True,
    }
    with patch("lpb.config._config", test_config):
        yield test_config


@pytest.fixture
def fake_client():
    """Remote client whose generator coroutines are AsyncMocks."""
    client = MagicMock()
    for task in SECTIONS.values():
        setattr(client, task.generator, AsyncMock(return_value=f"Hasil {task.section}"))
    client.generate_core_activities.return_value = [
        {"title": "Kegiatan 1", "description": "Uraian 1"},
    ]
    client.generate_assessment_strategies.return_value = {
        "awal": "Asesmen awal", "proses": "Asesmen proses", "akhir": "Asesmen akhir",
    }
    client.generate_anecdotal_record.return_value = {
        "studentName": "Budi", "date": "12 Mei", "observation": "Aktif bertanya", "followUp": "Beri tantangan",
    }
    client.generate_checklist_data.return_value = [
        {"aspect": "Bertanya", "indicator": "Mengajukan pertanyaan relevan"},
    ]
    client.generate_creative_ideas = AsyncMock(return_value=[
        {"title": "Ide 1", "description": "Uraian ide 1"},
    ])
    return client


@pytest.fixture
def exporter():
    return AsyncMock(return_value="/tmp/rencana.docx")


@pytest.fixture
def session(mock_config, fake_client, exporter, base_document):
    return LessonPlanSession(fake_client, exporter=exporter, document=base_document)


@pytest.fixture
def sample_activity():
    return {
        "title": "Eksperimen Siklus Air dalam Plastik",
        "description": "Siswa membuat model siklus air dalam kantong plastik.",
    }
