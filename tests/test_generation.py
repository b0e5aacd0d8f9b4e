"""Tests for section generation: run_generation, the SECTIONS table, run_stages."""

import asyncio
import copy
from unittest.mock import AsyncMock

import pytest

from lpb.generation import GENERATION_STAGES, SECTIONS, run_generation, run_stages


class TestSectionsTable:
    def test_fixed_section_set(self):
        assert set(SECTIONS) == {
            "objectives", "interdisciplinary", "pedagogy", "partnership", "environment",
            "digital", "opening", "activities", "closing", "assessment", "anecdote", "checklist",
        }

    def test_every_section_in_exactly_one_stage(self):
        staged = [s for stage in GENERATION_STAGES for s in stage]
        assert sorted(staged) == sorted(SECTIONS)

    def test_objectives_extractor(self, base_document):
        args = SECTIONS["objectives"].get_args(base_document)
        assert args == [base_document["design"]["capaianPembelajaran"], "Kelas V (Fase C)"]

    def test_activities_extractor_reads_objectives(self, base_document):
        base_document["design"]["tujuanPembelajaran"] = "TP 1"
        args = SECTIONS["activities"].get_args(base_document)
        assert args == [base_document["topic"], base_document["class"], "TP 1"]

    def test_extractor_missing_field_yields_default(self):
        args = SECTIONS["anecdote"].get_args({"topic": "Air"})
        assert args == ["Air", "", []]


class TestSuccessPath:
    @pytest.mark.asyncio
    async def test_objectives_written(self, session, fake_client):
        fake_client.generate_learning_objectives.return_value = "1. Siswa mampu menjelaskan siklus air."

        applied = await run_generation(session, "objectives")

        assert applied is True
        assert session.document["design"]["tujuanPembelajaran"] == "1. Siswa mampu menjelaskan siklus air."
        assert session.registry.get("objectives") == {"running": False, "error_message": None}

    @pytest.mark.asyncio
    async def test_remote_called_with_extracted_args(self, session, fake_client):
        await run_generation(session, "opening")
        fake_client.generate_opening_activities.assert_awaited_once_with(
            session.document["topic"], session.document["class"]
        )

    @pytest.mark.asyncio
    async def test_running_while_in_flight(self, session, fake_client):
        seen = {}

        async def _generate(*_args):
            seen["state"] = session.registry.get("closing")
            return "Refleksi"

        fake_client.generate_closing_activities = AsyncMock(side_effect=_generate)
        await run_generation(session, "closing")

        assert seen["state"] == {"running": True, "error_message": None}

    @pytest.mark.asyncio
    async def test_assessment_writes_three_fields(self, session, fake_client):
        fake_client.generate_assessment_strategies.return_value = {
            "awal": "Kuis diagnostik", "proses": "Observasi", "akhir": "Proyek poster",
        }

        await run_generation(session, "assessment")

        assessment = session.document["assessment"]
        assert (assessment["awal"], assessment["proses"], assessment["akhir"]) == (
            "Kuis diagnostik", "Observasi", "Proyek poster",
        )

    @pytest.mark.asyncio
    async def test_anecdote_appends(self, session, fake_client):
        a = {"studentName": "A", "date": "1", "observation": "a", "followUp": ""}
        b = {"studentName": "B", "date": "2", "observation": "b", "followUp": ""}
        c = {"studentName": "C", "date": "3", "observation": "c", "followUp": ""}
        session.update_field(["assessment", "anecdotalRecords"], [a, b])
        fake_client.generate_anecdotal_record.return_value = c

        await run_generation(session, "anecdote")

        assert session.document["assessment"]["anecdotalRecords"] == [a, b, c]

    @pytest.mark.asyncio
    async def test_anecdote_appends_to_records_present_on_arrival(self, session, fake_client):
        late = {"studentName": "Late", "date": "", "observation": "x", "followUp": ""}
        edited = {"studentName": "Edit", "date": "", "observation": "y", "followUp": ""}

        async def _generate(*_args):
            # A field edit lands while the call is in flight
            session.update_field(["assessment", "anecdotalRecords"], [edited])
            return late

        fake_client.generate_anecdotal_record = AsyncMock(side_effect=_generate)
        await run_generation(session, "anecdote")

        assert session.document["assessment"]["anecdotalRecords"] == [edited, late]

    @pytest.mark.asyncio
    async def test_checklist_numbered_from_one(self, session, fake_client):
        fake_client.generate_checklist_data.return_value = [
            {"no": 9, "aspect": "Bertanya", "indicator": "Mengajukan pertanyaan"},
            {"aspect": "Bekerja sama", "indicator": "Berbagi tugas"},
            {"no": 1, "aspect": "Menyimpulkan", "indicator": "Menyusun simpulan"},
        ]

        await run_generation(session, "checklist")

        checklist = session.document["assessment"]["checklist"]
        assert [item["no"] for item in checklist] == [1, 2, 3]
        assert checklist[1]["aspect"] == "Bekerja sama"


class TestFailurePath:
    @pytest.mark.asyncio
    async def test_opening_failure(self, session, fake_client, capsys):
        fake_client.generate_opening_activities.side_effect = RuntimeError("quota exceeded")
        before = copy.deepcopy(session.document)
        original = session.document

        applied = await run_generation(session, "opening")

        assert applied is False
        assert session.document is original
        assert session.document == before
        assert session.registry.get("opening") == {
            "running": False,
            "error_message": "Gagal merancang kegiatan pembuka. Silakan coba lagi.",
        }
        assert "[LPB] Error generating opening" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_malformed_result_error_is_absorbed(self, session, fake_client):
        fake_client.generate_core_activities.side_effect = ValueError("Expected a JSON array")

        await run_generation(session, "activities")

        assert session.registry.get("activities")["error_message"] == "Gagal merancang kegiatan inti. Silakan coba lagi."

    @pytest.mark.asyncio
    async def test_unusable_assessment_result_fails_section(self, session, fake_client, capsys):
        fake_client.generate_assessment_strategies.return_value = {"awal": "x"}
        original = session.document

        applied = await run_generation(session, "assessment")

        assert applied is False
        assert session.document is original
        assert session.document["assessment"]["awal"] == ""
        assert session.registry.get("assessment") == {
            "running": False,
            "error_message": "Gagal merancang strategi asesmen. Silakan coba lagi.",
        }
        assert "[LPB] Error generating assessment" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_unusable_checklist_item_fails_section(self, session, fake_client):
        fake_client.generate_checklist_data.return_value = ["bukan objek"]
        before = copy.deepcopy(session.document)

        applied = await run_generation(session, "checklist")

        assert applied is False
        assert session.document == before
        assert session.registry.get("checklist") == {
            "running": False,
            "error_message": "Gagal membuat data ceklis AI. Silakan coba lagi.",
        }

    @pytest.mark.asyncio
    async def test_retrigger_after_failure_succeeds(self, session, fake_client):
        fake_client.generate_pedagogical_practices.side_effect = [RuntimeError("boom"), "Discovery learning"]

        await run_generation(session, "pedagogy")
        await run_generation(session, "pedagogy")

        assert session.document["design"]["praktikPedagogis"] == "Discovery learning"
        assert session.registry.get("pedagogy") == {"running": False, "error_message": None}

    @pytest.mark.asyncio
    async def test_one_attempt_per_trigger(self, session, fake_client):
        fake_client.generate_digital_utilization.side_effect = RuntimeError("boom")
        await run_generation(session, "digital")
        assert fake_client.generate_digital_utilization.await_count == 1


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_second_completes_first(self, session, fake_client):
        objectives_gate = asyncio.Event()
        opening_gate = asyncio.Event()

        async def _objectives(*_args):
            await objectives_gate.wait()
            return "TP hasil AI"

        async def _opening(*_args):
            await opening_gate.wait()
            return "Kegiatan pembuka hasil AI"

        fake_client.generate_learning_objectives = AsyncMock(side_effect=_objectives)
        fake_client.generate_opening_activities = AsyncMock(side_effect=_opening)

        first = asyncio.create_task(session.generate("objectives"))
        second = asyncio.create_task(session.generate("opening"))
        await asyncio.sleep(0)
        assert session.registry.is_running("objectives")
        assert session.registry.is_running("opening")

        opening_gate.set()
        await second
        assert session.registry.is_running("objectives")
        assert not session.registry.is_running("opening")

        objectives_gate.set()
        await first

        assert session.document["design"]["tujuanPembelajaran"] == "TP hasil AI"
        assert session.document["experience"]["awal"] == "Kegiatan pembuka hasil AI"

    @pytest.mark.asyncio
    async def test_same_section_last_completion_wins(self, session, fake_client):
        gates = [asyncio.Event(), asyncio.Event()]
        answers = iter(["pertama", "kedua"])

        async def _generate(*_args):
            answer = next(answers)
            await gates[0 if answer == "pertama" else 1].wait()
            return answer

        fake_client.generate_learning_environment = AsyncMock(side_effect=_generate)

        first = asyncio.create_task(session.generate("environment"))
        second = asyncio.create_task(session.generate("environment"))
        await asyncio.sleep(0)

        gates[1].set()
        await second
        gates[0].set()
        await first

        assert session.document["design"]["lingkunganPembelajaran"] == "pertama"


class TestRunStages:
    @pytest.mark.asyncio
    async def test_later_stage_sees_earlier_output(self, session, fake_client):
        fake_client.generate_learning_objectives.return_value = "TP dari tahap satu"

        await run_stages(session, ["objectives", "activities"])

        args = fake_client.generate_core_activities.await_args.args
        assert args[2] == "TP dari tahap satu"

    @pytest.mark.asyncio
    async def test_returns_outcome_per_section(self, session, fake_client):
        fake_client.generate_closing_activities.side_effect = RuntimeError("boom")

        outcomes = await run_stages(session, ["opening", "closing"])

        assert outcomes == {"opening": True, "closing": False}

    @pytest.mark.asyncio
    async def test_all_sections_by_default(self, session):
        outcomes = await run_stages(session)
        assert set(outcomes) == set(SECTIONS)

    @pytest.mark.asyncio
    async def test_unknown_section_raises(self, session):
        with pytest.raises(ValueError):
            await run_stages(session, ["homework"])
