"""Seed lesson plan used when a session starts."""

import copy

from lpb.document import LessonPlan

_LESSON_PLAN_DATA: LessonPlan = {
    "teacherName": "Siti Rahmawati, S.Pd.",
    "school": "SD Negeri 1 Sukamaju",
    "subject": "Ilmu Pengetahuan Alam dan Sosial (IPAS)",
    "topic": "Siklus Air dan Dampaknya bagi Kehidupan",
    "class": "Kelas V (Fase C)",
    "duration": "2 x 35 menit",
    "design": {
        "capaianPembelajaran": (
            "Peserta didik mendeskripsikan siklus air dan mengaitkannya dengan upaya "
            "menjaga ketersediaan air bersih di lingkungan sekitar."
        ),
        "tujuanPembelajaran": "",
        "lintasDisiplinIlmu": "",
        "praktikPedagogis": "",
        "kemitraanPembelajaran": "",
        "lingkunganPembelajaran": "",
        "pemanfaatanDigital": "",
    },
    "experience": {
        "awal": "",
        "inti": [
            {
                "title": "Eksperimen Siklus Air dalam Plastik",
                "description": (
                    "Siswa membuat model siklus air menggunakan kantong plastik berisi air "
                    "yang ditempel di jendela, lalu mengamati penguapan dan pengembunan."
                ),
            },
            {
                "title": "Diskusi Kelompok Sumber Air Bersih",
                "description": (
                    "Kelompok memetakan sumber air di sekitar sekolah dan menyusun usulan "
                    "cara menjaganya."
                ),
            },
        ],
        "penutup": "",
    },
    "assessment": {
        "awal": "",
        "proses": "",
        "akhir": "",
        "anecdotalRecords": [],
        "checklist": [],
    },
}


def build_initial_lesson_plan() -> LessonPlan:
    """Return a fresh copy of the seed lesson plan; sessions never share it."""
    return copy.deepcopy(_LESSON_PLAN_DATA)
