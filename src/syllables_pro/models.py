"""
Datenmodell für das Analyseergebnis.

Das Ergebnis wird pro Analyseaufruf einmal erzeugt und danach nicht mehr
verändert (frozen Dataclass). UI und CLI lesen nur daraus.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """
    Ergebnis einer Textanalyse.

    Attributes:
        word_count: Anzahl der Tokens nach der Tokenisierung.
        total_syllables: Summe der heuristisch geschätzten Silben.
        neumernym_string: Neumernyms aller Wörter, mit je einem Leerzeichen
            verbunden, in Originalreihenfolge.
    """
    word_count: int
    total_syllables: int
    neumernym_string: str

    @property
    def avg_syllables_per_word(self) -> float:
        """Silben pro Wort; bei leerem Text 0.0 (Division durch 1)."""
        return self.total_syllables / (self.word_count or 1)
