"""Pedagogical guidance for injection into the generator system prompt.

Condensed from the deep-learning (pembelajaran mendalam) principles the
lesson plan template is organized around. Edit the list below when the
template changes.
"""

_GUIDANCE_RULES = """\
- Pembelajaran berkesadaran (mindful): siswa memahami tujuan belajar dan \
menyadari proses berpikirnya sendiri.
- Pembelajaran bermakna (meaningful): kaitkan materi dengan konteks nyata dan \
pengalaman sehari-hari siswa.
- Pembelajaran menggembirakan (joyful): rancang kegiatan yang menantang, \
menyenangkan, dan memotivasi.
- Sesuaikan bahasa, kedalaman materi, dan durasi kegiatan dengan fase dan kelas siswa.
- Urutkan pengalaman belajar sebagai memahami, mengaplikasi, lalu merefleksi.
- Rumuskan tujuan dan asesmen yang dapat diamati dan diukur.\
"""


def load_guidance() -> str:
    """Return the pedagogical guidance rules.

    Returns an empty string if guidance is disabled in config
    (set guidance_enabled to false or remove it).
    """
    from lpb.config import get_config

    config = get_config()
    if not config.get("guidance_enabled", False):
        return ""

    return _GUIDANCE_RULES
