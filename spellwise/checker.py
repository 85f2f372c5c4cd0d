"""Interactive spell checker backed by a hash-table dictionary."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from pathlib import Path
from string import ascii_lowercase
from typing import Iterable, Optional, TextIO

from .bst import BinarySearchTree
from .hashtable import HashTable

DICTIONARY_SIZE = 500
IGNORED_SIZE = 100
DEFAULT_DICTIONARY = "dict.txt"
DEFAULT_NOT_FOUND = "notfound.txt"

_MENU = (
    "\n!@#$%^&*(){{}} THE SPELL CHECKER PROGRAM !@#$%^&*(){{}}\n\n"
    "{word} On Line {line} Was Not Found In Dictionary\n\n"
    "A) Add the Word To Dictionary\n"
    "I) Ignore Word, and Skip Future References\n"
    "G) Go On To Next Word\n"
    "S) Search For A Suggested Spelling\n"
    "Q) Quit Spell Checking File\n\n"
    "Selection: "
)


def clean_word(word: str) -> str:
    """Keep only the ASCII letters of ``word``, lower-cased."""
    return "".join(ch.lower() for ch in word if ch.isascii() and ch.isalpha())


def generate_suggestions(cleaned_word: str, dictionary) -> list[str]:
    """Return dictionary words one edit away from ``cleaned_word``.

    Candidates come in this order: adjacent swaps, one letter inserted,
    one letter removed, one letter replaced.
    """
    word = cleaned_word
    candidates: list[str] = []
    candidates.extend(
        word[:i] + word[i + 1] + word[i] + word[i + 2:] for i in range(len(word) - 1)
    )
    candidates.extend(
        word[:i] + c + word[i:] for i in range(len(word) + 1) for c in ascii_lowercase
    )
    candidates.extend(word[:i] + word[i + 1:] for i in range(len(word)))
    candidates.extend(
        word[:i] + c + word[i + 1:] for i in range(len(word)) for c in ascii_lowercase
    )
    return [candidate for candidate in candidates if dictionary.find(candidate)]


@dataclass
class Misspelling:
    """A word not found in the dictionary and the line it first appeared on."""

    word: str
    line_number: int

    def __lt__(self, other: "Misspelling") -> bool:
        return self.word < other.word

    def __str__(self) -> str:
        return f"{self.word} {self.line_number}"


class Action(enum.Enum):
    ADD = "a"
    IGNORE = "i"
    GO_ON = "g"
    SUGGEST = "s"
    QUIT = "q"


class QuitChecking(Exception):
    """Raised when the user chooses to stop checking."""


class SpellChecker:
    """Checks text against a dictionary, asking the user about unknown words."""

    def __init__(self, dict_path, input_stream: TextIO, output_stream: TextIO) -> None:
        self.dict_path = Path(dict_path)
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.dictionary = HashTable(DICTIONARY_SIZE)
        self.ignored = HashTable(IGNORED_SIZE)
        self.not_found: BinarySearchTree[Misspelling] = BinarySearchTree(
            Misspelling("", 0)
        )

    def _say(self, text: str) -> None:
        self.output_stream.write(text)
        self.output_stream.flush()

    def load_dictionary(self) -> bool:
        """Load whitespace-separated words from the dictionary file.

        Returns False, after telling the user, when the file does not exist.
        """
        try:
            text = self.dict_path.read_text()
        except FileNotFoundError:
            self._say("Dictionary file not found. Starting with an empty dictionary.\n")
            return False
        for word in text.split():
            self.dictionary.insert(word)
        return True

    def check_lines(self, lines: Iterable[str]) -> None:
        """Check every word of ``lines``, numbering lines from 1."""
        for line_number, line in enumerate(lines, start=1):
            for word in line.split():
                cleaned = clean_word(word)
                if (
                    cleaned
                    and not self.dictionary.find(cleaned)
                    and not self.ignored.find(cleaned)
                ):
                    self.not_found.insert(Misspelling(cleaned, line_number))
                    self.handle(cleaned, line_number)

    def _read_choice(self) -> str:
        for line in self.input_stream:
            stripped = line.strip()
            if stripped:
                return stripped[0].lower()
        return ""

    def _wait_for_return(self) -> None:
        self.input_stream.readline()

    def handle(self, cleaned_word: str, line_number: int) -> Optional[Action]:
        """Show the menu for an unknown word and carry out the user's choice.

        Returns the chosen action, or None for an invalid choice.
        Raises QuitChecking when the user quits.
        """
        self._say(_MENU.format(word=cleaned_word, line=line_number))
        try:
            action = Action(self._read_choice())
        except ValueError:
            self._say("\nInvalid Choice -- Please Hit Return to Continue.\n")
            self._wait_for_return()
            return None

        if action is Action.ADD:
            self.add_to_dictionary(cleaned_word)
            self._say(f"\n{cleaned_word} was added to the dictionary!\n")
        elif action is Action.IGNORE:
            self.ignored.insert(cleaned_word)
            self._say(f"\nAll future references of {cleaned_word} will be skipped.\n")
        elif action is Action.SUGGEST:
            suggestions = generate_suggestions(cleaned_word, self.dictionary)
            if suggestions:
                listed = "".join(f"{s}   " for s in suggestions)
                self._say(f"\nSuggested Spelling(s) : {listed}\n")
            else:
                self._say("\nNo suggested spellings were found in dictionary.\n")
            self._say("\nPlease Hit Return to Continue...\n")
            self._wait_for_return()
        elif action is Action.QUIT:
            self._say("Now Exiting Program...\n")
            raise QuitChecking
        return action

    def add_to_dictionary(self, cleaned_word: str) -> None:
        """Add a word to the in-memory dictionary and append it to the file."""
        self.dictionary.insert(cleaned_word)
        with self.dict_path.open("a") as handle:
            handle.write(f"{cleaned_word}\n")

    def write_not_found(self, path) -> None:
        """Write the unknown words, sorted, with their first line numbers."""
        with open(path, "w") as handle:
            self.not_found.write(handle)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    checker = SpellChecker(DEFAULT_DICTIONARY, sys.stdin, sys.stdout)
    checker.load_dictionary()

    if not args:
        sys.stderr.write("Error: Unable to open source file.\n")
        return 1
    try:
        source = open(args[0])
    except OSError:
        sys.stderr.write("Error: Unable to open source file.\n")
        return 1

    with source:
        try:
            checker.check_lines(source)
        except QuitChecking:
            checker.write_not_found(DEFAULT_NOT_FOUND)
            return 0

    checker.write_not_found(DEFAULT_NOT_FOUND)
    print("Spell checking complete. Misspelled words have been processed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())