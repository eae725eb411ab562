# apps/cli/play.py
"""
Interactive terminal front end for the word game.

Shows the root word, the running score and the accepted words (with their
lengths), and reads one candidate per line. Commands:
  :new   pick a new root word (clears words and score)
  :hint  how many words are still findable
  :quit  leave (EOF works too)
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, List, TextIO

from packages.datasets import START_WORDS_PATH, DICTIONARY_PATH, load_words
from packages.engine import GameSession, possible_words
from packages.lexicon import load_dictionary


def _render(session: GameSession, out: TextIO) -> None:
    print(f"== {session.root_word} ==  Score: {session.score}", file=out)
    for w in session.used_words:
        print(f"  ({len(w)}) {w}", file=out)


def play(
        session: GameSession,
        *,
        start_words: List[str],
        dictionary,
        lines: Iterable[str],
        rng: random.Random,
        out: TextIO = sys.stdout,
) -> GameSession:
    """
    Drive a session from an iterable of input lines until :quit or EOF.
    Returns the session (for callers that want the final state).
    """
    session.start(start_words, rng)
    _render(session, out)

    for line in lines:
        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            session.start(start_words, rng)
            _render(session, out)
            continue
        if cmd == ":hint":
            left = [w for w in possible_words(session.root_word, dictionary.words())
                    if w not in session.used_words]
            print(f"{len(left)} word(s) left to find", file=out)
            continue

        r = session.submit(line, dictionary)
        if r.status == "ignored":
            continue
        if r.error:
            print(f"{r.title}: {r.message}", file=out)
            continue
        _render(session, out)

    print(f"Final score: {session.score}", file=out)
    return session


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Word game: make words from the root word's letters")
    ap.add_argument("--start", default=str(START_WORDS_PATH),
                    help="path to root-word list (one word per line)")
    ap.add_argument("--dictionary", default=str(DICTIONARY_PATH),
                    help="path to dictionary word list (one word per line)")
    ap.add_argument("--language", default="en", help="dictionary language code")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word selection")
    args = ap.parse_args(argv)

    # Without root words or a dictionary there is no game to play
    try:
        start_words = load_words(args.start)
        dictionary = load_dictionary(args.dictionary, language=args.language)
    except FileNotFoundError as e:
        print(f"Could not load word list: {e}", file=sys.stderr)
        return 1

    session = GameSession(language=args.language)
    print("Type a word and press Enter. Commands: :new  :hint  :quit")
    play(
        session,
        start_words=start_words,
        dictionary=dictionary,
        lines=(ln.rstrip("\n") for ln in sys.stdin),
        rng=random.Random(args.seed),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
