"""
Zentrale Konstanten für Syllables.pro.

Enthält:
- Zeichensätze der Tokenisierung und der Silbenheuristik
- Grenzwerte der Neumernym-Kompression
- UI-Texte und die kosmetische Analyseverzögerung
"""

import os

from syllables_pro.utils import non_negative_float_or_default


# =========================
# Tokenisierung
# =========================
# Diese Zeichen werden vor der Wortextraktion durch ein Leerzeichen ersetzt.
# Apostroph und Fragezeichen gehören nicht dazu.
PUNCTUATION_CHARS = ".,/#!$%^&*;:{}=-_`~()"

# =========================
# Silbenheuristik
# =========================
VOWELS = "aeiouy"

# =========================
# Neumernym
# =========================
NEUMERNYM_MAX_PLAIN_LENGTH = 4  # Wörter bis zu dieser Länge bleiben unverändert
NEUMERNYM_MIN_LETTERS = 4  # weniger Buchstaben -> keine Kompression

# =========================
# UI
# =========================
PAGE_TITLE = "Syllables.pro"
TAGLINE = "For writers, for poets, for Michelle"

DEFAULT_ANALYSIS_DELAY_SECONDS = 0.5
ANALYSIS_DELAY_ENV = "SYLLABLES_PRO_ANALYSIS_DELAY"


def analysis_delay_seconds() -> float:
    """
    Liefert die kosmetische Wartezeit vor der Ergebnisanzeige.

    Die Analyse selbst ist sofort fertig; die Verzögerung gehört nur zur UI
    (Ladezustand sichtbar machen). Über die Umgebungsvariable
    SYLLABLES_PRO_ANALYSIS_DELAY lässt sie sich anpassen, 0 schaltet sie ab.
    """
    return non_negative_float_or_default(
        os.environ.get(ANALYSIS_DELAY_ENV),
        DEFAULT_ANALYSIS_DELAY_SECONDS,
    )
