# spellwise

An interactive spell checker for plain-text files.

spellwise reads a text file line by line and splits each line on whitespace. It
cleans each word by keeping only its ASCII letters and lower-casing them. If a
cleaned word is in neither the dictionary nor the ignore list, spellwise asks
what to do with it:

- **A**: add the word to the dictionary. The word is also appended to `dict.txt`.
- **I**: ignore the word and skip it for the rest of the run.
- **G**: go on to the next word.
- **S**: show suggested spellings from the dictionary, then wait for Return.
- **Q**: quit. The misspellings found so far are written out and the program exits.

Any other answer is reported as an invalid choice, and checking goes on with the
next word.

When the run ends, `notfound.txt` lists each distinct misspelled word with the
number of the line where it first appeared, as `word line`. The list is sorted
alphabetically.

## Installation

```
pip install .
```

## Usage

```
spellwise mydocument.txt
```

The dictionary is read from `dict.txt` in the current directory, one word per
whitespace-separated token. If that file is missing, spellwise says so and starts
with an empty dictionary. If no file is given, or the file cannot be opened, it
prints `Error: Unable to open source file.` and exits with status 1.

## Suggestions

`generate_suggestions` tries every candidate one edit away from the word, in this
order: swapping two adjacent letters, inserting a letter, deleting a letter, and
replacing a letter. It returns the candidates that are in the dictionary. A word
reachable by more than one edit appears more than once.

## Library use

The building blocks can be used on their own:

```python
from spellwise.hashtable import HashTable
from spellwise.checker import clean_word, generate_suggestions

words = HashTable(10)
words.insert("hello")
words.insert("world")

"hello" in words                               # True
words.find("help")                             # False
clean_word("Hel-lo!")                          # "hello"
generate_suggestions("wrold", words)           # ["world"]
```

`spellwise.hashtable.HashTable(size)` is a fixed-capacity set of strings with
`2 * size` slots and linear probing. It does not check for duplicates on insert,
and it raises `OverflowError` when it is full.

`spellwise.bst.BinarySearchTree(not_found)` is an unbalanced binary search tree.
It compares items with `<` only and ignores duplicates. It offers `insert`,
`remove`, `find`, `find_min`, `find_max`, `clear`, `is_empty` and `copy`, and
iterates in sorted order. `write(stream)` writes one item per line. Failed
lookups return the `not_found` value.

`spellwise.checker.SpellChecker(dict_path, input_stream, output_stream)` runs the
interactive checking over any text streams. `load_dictionary()` loads the
dictionary file, `check_lines(lines)` checks the given lines, and
`write_not_found(path)` writes the sorted list of misspellings. When the user
quits, `handle` raises `QuitChecking`.

## Limits

The dictionary has a fixed capacity of 1000 words and the ignore list 200. Adding
words beyond that raises `OverflowError`. Words containing non-ASCII letters lose
those letters when cleaned.

## Running the tests

```
pip install .[test]
pytest
```