"""
Top-Level Package für Syllables.pro.

Enthält:
- config: zentrale Konstanten
- models: Dataclass für das Analyseergebnis
- utils: kleine Hilfsfunktionen
- nlp: Tokenisierung, Silben, Neumernyms, Pipeline + Report
- cli: Kommandozeilen-Wrapper um analyze()
"""

from syllables_pro.models import AnalysisResult
from syllables_pro.nlp.analysis import analyze

__all__ = ["AnalysisResult", "analyze"]
