"""
Build the solver dictionary (words.json) from past Wordle answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Optionally merges words from an existing list (JSON array or text).
- Lowercases, de-duplicates while preserving order, and writes the dictionary.

Usage:
    python -m script.build_dictionary --out words.json
    python -m script.build_dictionary --merge extra_words.txt --sort --out words.json
"""

import argparse
import re
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

from splitword.datasets import load_words, write_words

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> List[str]:
    """Answers found in the page, lowercased, in calendar order, no repeats."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Build the splitword dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--merge", action="append", default=[],
                    help="extra word list(s) to append (JSON array or text)")
    ap.add_argument("--out", default="words.json")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    words = fetch_answers(args.url)
    for path in args.merge:
        words += [w for w in load_words(path) if len(w) == 5 and w.isalpha()]
    words = unique_preserve_order(words)
    if args.sort:
        words = sorted(words)

    write_words(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
