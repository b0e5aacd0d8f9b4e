"""Prompt templates for the lesson plan generator.

Text sections answer in plain prose. Structured sections answer with a raw
JSON payload whose shape is spelled out in the template.
"""

SYSTEM_PROMPT = """\
Anda adalah asisten perancang pembelajaran untuk guru di Indonesia. Anda membantu \
menyusun dokumen Perencanaan Pembelajaran berbasis pembelajaran mendalam.

Aturan:
- Tulis dalam Bahasa Indonesia yang baku, jelas, dan ringkas.
- Sesuaikan isi dengan topik, fase, dan kelas yang diberikan.
- Jangan menambahkan salam, pengantar, atau penutup di luar isi yang diminta.
- Jika diminta JSON, balas HANYA dengan objek atau array JSON mentah, tanpa \
pagar kode markdown dan tanpa komentar.
"""

LEARNING_OBJECTIVES_PROMPT = """\
Berdasarkan Capaian Pembelajaran berikut, rumuskan 3-5 tujuan pembelajaran yang \
spesifik, terukur, dan dapat diamati untuk {class_info}.

Capaian Pembelajaran:
{capaian}

Tulis setiap tujuan sebagai satu baris bernomor.
"""

INTERDISCIPLINARY_PROMPT = """\
Jelaskan keterkaitan topik "{topic}" untuk {class_info} dengan 2-3 disiplin ilmu \
lain (lintas disiplin ilmu). Untuk setiap disiplin, tulis satu paragraf singkat \
tentang bentuk keterkaitannya di kelas.
"""

PEDAGOGICAL_PRACTICES_PROMPT = """\
Rekomendasikan praktik pedagogis (model, strategi, dan metode pembelajaran) yang \
paling sesuai untuk topik "{topic}" di {class_info}. Sertakan alasan singkat \
pemilihannya.
"""

LEARNING_PARTNERSHIP_PROMPT = """\
Rancang kemitraan pembelajaran untuk topik "{topic}" di {class_info}: pihak yang \
dapat dilibatkan (guru lain, orang tua, komunitas, ahli) dan peran konkret masing-masing.
"""

LEARNING_ENVIRONMENT_PROMPT = """\
Rancang lingkungan pembelajaran untuk topik "{topic}" di {class_info}, mencakup \
ruang fisik, ruang virtual, dan budaya belajar yang mendukung.
"""

DIGITAL_UTILIZATION_PROMPT = """\
Rekomendasikan pemanfaatan teknologi digital untuk topik "{topic}" di {class_info}. \
Sebutkan alat atau platform, kegunaannya dalam pembelajaran, dan catatan \
keamanan atau etika penggunaannya.
"""

OPENING_ACTIVITIES_PROMPT = """\
Rancang kegiatan pembuka (awal) pembelajaran untuk topik "{topic}" di {class_info}: \
apersepsi, motivasi, dan penyampaian tujuan. Tulis sebagai langkah-langkah bernomor \
beserta perkiraan waktu.
"""

CORE_ACTIVITIES_PROMPT = """\
Rancang 3-4 kegiatan inti pembelajaran untuk topik "{topic}" di {class_info} yang \
mengikuti alur memahami, mengaplikasi, dan merefleksi.

Tujuan pembelajaran:
{objectives}

Balas dengan array JSON:
[{{"title": "judul kegiatan", "description": "uraian langkah kegiatan"}}]
"""

CLOSING_ACTIVITIES_PROMPT = """\
Rancang kegiatan penutup pembelajaran untuk topik "{topic}" di {class_info}: \
refleksi, simpulan bersama, umpan balik, dan tindak lanjut. Tulis sebagai \
langkah-langkah bernomor beserta perkiraan waktu.
"""

ASSESSMENT_STRATEGIES_PROMPT = """\
Rancang strategi asesmen untuk topik "{topic}" di {class_info}.

Tujuan pembelajaran:
{objectives}

Balas dengan objek JSON:
{{"awal": "asesmen awal (diagnostik)", "proses": "asesmen proses (formatif)", \
"akhir": "asesmen akhir (sumatif)"}}
"""

ANECDOTAL_RECORD_PROMPT = """\
Buat satu contoh catatan anekdot yang realistis tentang perilaku belajar seorang \
siswa selama pembelajaran topik "{topic}".

Tujuan pembelajaran:
{objectives}

Kegiatan inti:
{activities}

Balas dengan objek JSON:
{{"studentName": "nama siswa", "date": "tanggal", "observation": "peristiwa yang \
diamati", "followUp": "interpretasi dan tindak lanjut guru"}}
"""

CHECKLIST_PROMPT = """\
Susun daftar ceklis observasi untuk topik "{topic}" berisi 4-6 aspek yang dapat \
diamati selama kegiatan.

Tujuan pembelajaran:
{objectives}

Kegiatan inti:
{activities}

Balas dengan array JSON:
[{{"aspect": "aspek yang diamati", "indicator": "indikator ketercapaian"}}]
"""

CREATIVE_IDEAS_PROMPT = """\
Berikan {count} ide kreatif untuk memperkaya kegiatan berikut bagi {class_info}.

Judul kegiatan: {title}
Deskripsi kegiatan: {description}

Balas dengan array JSON:
[{{"title": "nama ide", "description": "uraian singkat cara melaksanakannya"}}]
"""
