"""
Syllables.pro – Streamlit App
- Text einfügen, "Analysieren" klicken
- Ausgabe: Wortanzahl, geschätzte Silben, Silben pro Wort
- Neumernym-Kompression aller Wörter ("international" -> "i11l")
- Button ist gesperrt, solange das Textfeld leer ist
- Kurze Ladeanzeige (kosmetisch, Analyse ist sofort fertig)

Install:
  pip install -e .

Run:
  python -m streamlit run app.py
"""

import time

import streamlit as st

from syllables_pro.config import PAGE_TITLE, TAGLINE, analysis_delay_seconds
from syllables_pro.models import AnalysisResult
from syllables_pro.nlp.analysis import analyze
from syllables_pro.nlp.report import build_report
from syllables_pro.utils import format_average, format_count, is_submittable


# =========================
# Analyse (gecached)
# =========================
@st.cache_data
def cached_analyze(text: str) -> AnalysisResult:
    return analyze(text)


# =========================
# Session State Init
# =========================
def ensure_defaults_exist() -> None:
    st.session_state.setdefault("text_input", "")
    st.session_state.setdefault("show_report", False)


def run_analysis(text: str) -> None:
    # Ergebnis steht sofort fest; die Wartezeit ist nur für die Ladeanzeige
    with st.spinner("Analysiere ..."):
        result = cached_analyze(text)
        delay = analysis_delay_seconds()
        if delay > 0:
            time.sleep(delay)
    st.session_state["last_result"] = result


def render_result(result: AnalysisResult) -> None:
    st.subheader("Analyseergebnis")

    c1, c2, c3 = st.columns(3)
    c1.metric("Wörter", format_count(result.word_count))
    c2.metric("Silben (geschätzt)", format_count(result.total_syllables))
    c3.metric("Silben/Wort (Ø)", format_average(result.avg_syllables_per_word))

    st.markdown("**Neumernym-Kompression** (erster Buchstabe + Anzahl + letzter Buchstabe)")
    st.code(result.neumernym_string, language="text")

    if st.session_state.get("show_report", False):
        with st.expander("Report", expanded=True):
            st.text(build_report(result))


# =========================
# UI
# =========================
st.set_page_config(page_title=PAGE_TITLE, layout="centered")
st.title(PAGE_TITLE)
st.caption(TAGLINE)

ensure_defaults_exist()

with st.sidebar:
    st.header("Hinweise")
    st.caption(
        "Silben werden über Vokalgruppen (a, e, i, o, u, y) geschätzt, "
        "mit Korrektur für ein stummes End-e. Keine Wörterbuch-Auswertung."
    )
    st.toggle("Report anzeigen", key="show_report")

text = st.text_area(
    "Text eingeben",
    key="text_input",
    height=180,
    placeholder="Gedicht, Absatz oder Essay hier einfügen ...",
    help="Englischer Text; Satzzeichen werden vor der Zählung entfernt.",
)

if st.button(
    "Analysieren",
    type="primary",
    disabled=not is_submittable(text),
    help="Startet die Analyse des eingegebenen Texts.",
):
    try:
        run_analysis(text)
    except Exception as e:
        st.error(str(e))

if "last_result" in st.session_state:
    render_result(st.session_state["last_result"])
else:
    st.info("Text einfügen und auf Analysieren klicken.")
