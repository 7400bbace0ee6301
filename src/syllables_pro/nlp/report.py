"""
Report-Erzeugung für UI und CLI.

- build_report: menschenlesbarer Text (Expander in der UI, "pretty" im CLI)
- result_to_dict: JSON-serialisierbares dict
- result_to_row: eine tab-getrennte Zeile
"""

from syllables_pro.models import AnalysisResult
from syllables_pro.utils import format_average, format_count


def result_to_dict(result: AnalysisResult) -> dict:
    """Serialisiert ein AnalysisResult für json.dumps."""
    return {
        "word_count": result.word_count,
        "total_syllables": result.total_syllables,
        "avg_syllables_per_word": round(result.avg_syllables_per_word, 2),
        "neumernym_string": result.neumernym_string,
    }


def result_to_row(result: AnalysisResult) -> str:
    return f"{result.word_count}\t{result.total_syllables}\t{result.neumernym_string}"


def build_report(result: AnalysisResult) -> str:
    lines: list[str] = []
    lines.append("ANALYSE (Heuristik, keine Wörterbuch-Auswertung)")
    lines.append("")

    lines.append(f"Wörter: {format_count(result.word_count)}")
    lines.append(f"Silben (geschätzt): {format_count(result.total_syllables)}")
    lines.append(f"Silben/Wort (Ø): {format_average(result.avg_syllables_per_word)}")
    lines.append("")

    lines.append("Neumernym-Kompression (erster Buchstabe + Anzahl + letzter Buchstabe):")
    lines.append(result.neumernym_string if result.neumernym_string else "n/a (keine Wörter)")

    return "\n".join(lines)
