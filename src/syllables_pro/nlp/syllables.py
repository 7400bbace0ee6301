"""
Silbenschätzung für einzelne Wörter.

Reine Heuristik über Vokalgruppen (a, e, i, o, u, y) mit Korrektur für ein
stummes End-e. Die Werte sind keine Wörterbuchsilben und sollen es auch
nicht werden: Ergebnisse wie "create" -> 1 gehören zur Heuristik.
"""

import re

from syllables_pro.config import VOWELS


_NON_LETTER_RE = re.compile(r"[^a-z]")


def count_syllables(word: str) -> int:
    """
    Schätzt die Silbenanzahl eines Wortes.

    Regeln:
    - alles außer a–z wird entfernt; bleibt nichts übrig → 0
    - jede zusammenhängende Vokalgruppe zählt als eine Silbe
    - endet das Wort auf "e" (aber nicht auf "le") und gibt es mehr als eine
      Gruppe, wird eine abgezogen
    - Minimum ist 1, auch ohne Vokale ("brr" → 1)
    """
    w = _NON_LETTER_RE.sub("", word.lower())
    if not w:
        return 0

    groups = 0
    prev_vowel = False
    for ch in w:
        is_v = ch in VOWELS
        if is_v and not prev_vowel:
            groups += 1
        prev_vowel = is_v

    # stummes e: "make" -> 1, "table" bleibt 2
    if groups > 1 and w.endswith("e") and not w.endswith("le"):
        groups -= 1

    return max(1, groups)
