"""
Kommandozeilen-Wrapper für analyze().

Eingabe (in dieser Reihenfolge): TEXT-Argument, --file, sonst stdin.
Ausgabe auf stdout, Fehlermeldungen auf stderr.

Beispiele:
  syllables-pro "The cat sat."
  syllables-pro --file gedicht.txt --mode json
  cat essay.txt | syllables-pro --mode tsv
"""

import argparse
import json
import sys

from syllables_pro.config import PAGE_TITLE, TAGLINE
from syllables_pro.nlp.analysis import analyze
from syllables_pro.nlp.report import build_report, result_to_dict, result_to_row


def read_input(text: str | None, path: str | None) -> str:
    """
    Liefert den zu analysierenden Text.

    Raises:
        OSError: wenn --file nicht gelesen werden kann.
        UnicodeDecodeError: wenn die Datei kein gültiges UTF-8 ist.
    """
    if text is not None:
        return text
    if path is not None:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    return sys.stdin.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syllables-pro",
        description=f"{PAGE_TITLE}: Wörter, Silben und Neumernyms. {TAGLINE}",
    )
    parser.add_argument("text", nargs="?", default=None, help="Zu analysierender Text (sonst --file oder stdin)")
    parser.add_argument("--file", type=str, default=None, help="UTF-8 Textdatei als Eingabe")
    parser.add_argument("--mode", choices=["pretty", "json", "tsv"], default="pretty", help="Ausgabeformat")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        raw = read_input(args.text, args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Fehler: Eingabe konnte nicht gelesen werden: {e}", file=sys.stderr)
        return 1

    result = analyze(raw)

    if args.mode == "json":
        print(json.dumps(result_to_dict(result), ensure_ascii=False))
    elif args.mode == "tsv":
        print(result_to_row(result))
    else:
        print(build_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
