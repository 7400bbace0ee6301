"""
Neumernym-Kompression ("international" -> "i11l").

Form: erster Buchstabe + Anzahl der inneren Buchstaben + letzter Buchstabe.
Gezählt werden nur ASCII-Buchstaben; Ziffern und sonstige Zeichen fallen weg.
"""

import re

from syllables_pro.config import NEUMERNYM_MAX_PLAIN_LENGTH, NEUMERNYM_MIN_LETTERS


_LETTER_RE = re.compile(r"[a-zA-Z]")


def generate_neumernym(word: str) -> str:
    """
    Komprimiert ein Wort zu seinem Neumernym.

    Verhalten:
    - Wörter mit höchstens 4 Zeichen bleiben unverändert.
    - Hat das Wort weniger als 4 Buchstaben (z.B. "a1b2c"), wird es ebenfalls
      unverändert zurückgegeben. Das ist kein Fehlerfall.
    - Groß-/Kleinschreibung von erstem und letztem Buchstaben bleibt erhalten.
    """
    if len(word) <= NEUMERNYM_MAX_PLAIN_LENGTH:
        return word

    letters = _LETTER_RE.findall(word)
    if len(letters) < NEUMERNYM_MIN_LETTERS:
        return word

    return f"{letters[0]}{len(letters) - 2}{letters[-1]}"
