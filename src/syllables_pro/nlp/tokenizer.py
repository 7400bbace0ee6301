"""
Tokenisierung des Eingabetexts.

Ablauf:
1. trimmen
2. Satzzeichen aus PUNCTUATION_CHARS durch Leerzeichen ersetzen
3. Whitespace-Folgen zusammenfassen
4. kleinschreiben
5. Wörter über \\b\\w+\\b extrahieren

Wortzeichen sind ASCII (A-Z, a-z, 0-9, _). Nicht-ASCII-Buchstaben gelten als
Trenner ("café" -> "caf"), Apostrophe ebenso ("don't" -> "don", "t").
"""

import re

from syllables_pro.config import PUNCTUATION_CHARS


_PUNCT_RE = re.compile("[" + re.escape(PUNCTUATION_CHARS) + "]")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_WORD_RE = re.compile(r"\b\w+\b", flags=re.ASCII)


def normalize_text(text: str | None) -> str:
    """Schritte 1–4: trimmen, Satzzeichen ersetzen, Whitespace zusammenfassen, lower()."""
    cleaned = _PUNCT_RE.sub(" ", (text or "").strip())
    return _MULTI_SPACE_RE.sub(" ", cleaned).lower()


def tokenize(text: str | None) -> list[str]:
    """
    Zerlegt Rohtext in eine geordnete Liste kleingeschriebener Wörter.

    Leere Eingabe oder Text ohne Wortzeichen ergibt eine leere Liste.
    """
    return _WORD_RE.findall(normalize_text(text))
