# joguinhos

A handful of small terminal games and programming exercises, each started
by its own command. The prompts and messages are in Portuguese. The package
uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Games

### Pacman with bombs

```
joguinhos-pacman [MAP]
```

Reads the map from `MAP`, or from `mapa.txt` in the current directory when
no file is given. The file starts with the number of rows and the number of
columns, followed by one whitespace-free token per row; every row must have
exactly the declared number of columns.

| Character | Meaning               |
|-----------|-----------------------|
| `@`       | the hero              |
| `#`       | a ghost (up to two)   |
| `.`       | empty floor           |
| `\|`, `-` | walls                 |
| `o`       | a pill                |
| `*`       | bomb blast            |

Move with `w` (up), `a` (left), `s` (down) and `d` (right); keys are read one
at a time without Enter when the input is a terminal. Stepping onto a pill
gives you a bomb; press `b` to set it off. The blast reaches three cells in
each direction, stops at walls and at the edge of the map, and kills any ghost
it covers; it is cleared on the next key press. After each key every living
ghost tries one step in a random direction and moves if that cell is empty or
holds the hero. The game ends when the hero is caught or when no ghost is left
alive. It also stops when input ends or on Ctrl-C.

The map is drawn with four-line ASCII tiles for every cell.

### Hangman (forca)

```
joguinhos-forca [WORDS]
```

Picks a secret word at random from `WORDS`, or from `palavras.txt` in the
current directory. The file starts with the number of words, followed by the
words themselves. Guess one character at a time; every miss counts, repeats
included, and the fifth miss loses the game. After a win you may type a new
word, which is appended and the whole file written back.

### Number guessing (adivinhação)

```
joguinhos-adivinhacao
```

Guess a secret number from 0 to 99. Choose a level first:

- `F` (easy): unlimited attempts
- `M` (medium): 7 attempts
- `D` (hard): 5 attempts

After each wrong guess you are told whether it was too high or too low.
Input that is not a whole number is skipped.

## Tools and exercises

### Record registry (cadastro)

```
joguinhos-cadastro
joguinhos-cadastro-classic
```

Holds ten records of name, address, postal code (up to 8 characters), district
and phone (the other fields up to 20 characters). Start with the built-in
records (mode `1`) or type all ten in yourself (mode `2`), then search by name
(`n`) or by phone (`t`) for an exact match and edit any field of a record that
was found. In `joguinhos-cadastro` the table shows each record's ID, a search
that finds nothing asks again, a search that matches several records asks
which ID to edit, and declining to edit goes back to the search menu.

`joguinhos-cadastro-classic` is an earlier, simpler edition: its table has no
ID column, there is a single search, and when several records match the last
one is edited.

### Exercises

```
joguinhos-exercicios [alfa | determinante | paridade] [--seed N]
```

- `alfa`: fills a two-element vector and a 2×2 matrix with random values
  between 0 and 1 and prints the matrix scaled by each vector element.
- `determinante`: fills a 3×3 matrix with random integers from 0 to 49 and
  prints the absolute value of `sarrus_determinant`. That function sums three
  primary and three secondary diagonal products as the exercise defines them;
  its secondary terms (`m01*m10*m22`, `m00*m12*m20`, `m02*m11*m21`) are not
  those of the textbook rule, so the result is not the true determinant of
  every matrix.
- `paridade` (the default): reads an integer and says whether it is even or
  odd.

`--seed` makes the random exercises repeatable.

### Spinner

```
joguinhos-spinner [--style spinner|blink] [--interval SECONDS] [--cycles N]
```

Redraws an animation in place on one terminal line until interrupted. The
`spinner` style turns `- \ | /` every 0.2 seconds; `blink` alternates a row of
stars and a row of dots every second. `--cycles` stops after that many passes.

## Using the modules

The pieces behind the commands can be used directly. For example, a Pacman
map can be parsed, played and drawn without the command:

```python
from joguinhos.pacman import Game
from joguinhos.pacman_map import parse_map
from joguinhos.pacman_ui import render

game = Game(parse_map("3 5\n|---|\n|@.#|\n|---|\n"))
game.command("d")
print(game.map.render_plain())
print(render(game.map))
```

Other entry points include `joguinhos.forca.Hangman`,
`joguinhos.adivinhacao.play` and `compare`, `joguinhos.cadastro.Registry`
(`search`, `update`, `table`), and `joguinhos.spinner.spin`.

## What it does not do

The record registry keeps its records in memory only: edits are lost when the
program exits. Pacman keeps no score and has no levels beyond the map file it
is given.