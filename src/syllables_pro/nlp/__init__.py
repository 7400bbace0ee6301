"""
NLP-Komponenten: Tokenisierung, Heuristiken und Reporting.

Dieses Package enthält:
- tokenizer: Normalisierung und Wortextraktion
- syllables: Silbenschätzung über Vokalgruppen
- neumernym: Kompression "international" -> "i11l"
- analysis: Pipeline, die alles zu einem AnalysisResult zusammenführt
- report: erzeugt die menschenlesbare Report-Ausgabe für UI und CLI
"""
