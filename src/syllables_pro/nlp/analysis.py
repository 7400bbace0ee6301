"""
Analyse-Pipeline: Rohtext -> AnalysisResult.

Verknüpft Tokenisierung, Silbenschätzung und Neumernym-Kompression.
Keine Seiteneffekte, keine Wartezeit; die kosmetische Verzögerung der UI
liegt ausschließlich in app.py.
"""

from syllables_pro.models import AnalysisResult
from syllables_pro.nlp.neumernym import generate_neumernym
from syllables_pro.nlp.syllables import count_syllables
from syllables_pro.nlp.tokenizer import tokenize


def analyze(text: str | None) -> AnalysisResult:
    """
    Analysiert einen Text.

    Rückgabe:
        AnalysisResult mit Wortanzahl, Silbensumme und den Neumernyms aller
        Wörter (Reihenfolge wie im Text, ein Leerzeichen als Trenner).

    Leere oder rein aus Satzzeichen bestehende Eingaben liefern (0, 0, "").
    """
    words = tokenize(text)

    total_syllables = 0
    neumernyms = []
    for word in words:
        total_syllables += count_syllables(word)
        neumernyms.append(generate_neumernym(word))

    return AnalysisResult(
        word_count=len(words),
        total_syllables=total_syllables,
        neumernym_string=" ".join(neumernyms),
    )
