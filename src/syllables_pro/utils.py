"""
Kleine Hilfsfunktionen für robuste UI- und Parameterverarbeitung.

- Normalisierung von Eingaben (z.B. Umgebungsvariablen → Sekunden)
- Formatierung der Kennzahlen für die Anzeige
- Freigabe des Analyse-Buttons
"""


def non_negative_float_or_default(value, default: float) -> float:
    """
    Normalisiert optionale Zahlenangaben (z.B. aus Umgebungsvariablen).

    Konvention:
    - None, leer oder nicht parsebar → default
    - negativ → default
    - sonst → float(value)
    """
    if value is None:
        return default
    try:
        v = float(value)
    except (TypeError, ValueError):
        return default
    return default if v < 0.0 else v


def is_submittable(text: str | None) -> bool:
    """
    UI-Regel: Analyse nur erlauben, wenn nach dem Trimmen Text übrig bleibt.
    """
    return bool((text or "").strip())


def format_count(value: int) -> str:
    # Tausendertrennzeichen wie in der ursprünglichen Web-Oberfläche
    return f"{value:,}"


def format_average(value: float) -> str:
    return f"{value:.2f}"
