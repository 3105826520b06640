# labkit

A set of small, self-contained programs from an introductory programming course.
It contains a chess rules engine, a crossword generator, Conway's Game of Life,
and a handful of console exercises on arithmetic, tables, files and simple data sets.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Libraries

### Chess rules (`labkit.chess`)

`new_game()` returns a `GameState` in the standard starting position with White
to move. Rows run 0 to 7 from Black's back rank to White's, and columns run 0 to 7.

`GameState.move_piece(src_row, src_col, dest_row, dest_col)` plays a move for
the side to move and returns `False` if the move is illegal. The engine
enforces piece movement, check, castling, en passant and promotion to a queen.
After each move it sets `status` (a `GameStatus`) and `game_over` on checkmate
or stalemate. It also sets `message` to `"Check!"`, the checkmate text or the
stalemate text.

`is_in_check(color)`, `is_square_attacked(by_color, row, col)`,
`has_any_legal_moves(color)` and `piece_at(row, col)` answer questions about a
position.

```python
from labkit.chess import new_game, Color

game = new_game()
game.move_piece(6, 4, 4, 4)    # white king's pawn two squares
game.move_piece(1, 4, 3, 4)    # black king's pawn two squares
game.is_in_check(Color.WHITE)  # False
```

### Crossword generation (`labkit.crossword`)

`read_words(stream)` reads up to twenty words of 2 to 15 letters and upper-cases
them. It stops at a lone `.` or at a word ending in `.`.

`Crossword.solve(words)` sorts the words longest first and places the first one
across the middle of a 15x15 grid. It then fits the others where they cross
existing letters with the best score. Words that do not fit on the first pass
are listed in `skipped` and retried.

`solution_text()` and `puzzle_text()` render the grid. `clues_text(words, rng)`
lists each placed word's location, direction and an anagram.
`save_to_file(path, crossword, words, rng)` writes all three to a file.

`labkit.crossword_future` has a second placement strategy. Its
`find_best_placement(crossword, words, word)` only tries crossings with placed
words. It also adds `future_score`, the free space left around the word.

### Game of Life (`labkit.life`)

`Board` is a 40x40 grid. Its methods are `add_cell`, `remove_cell`, `is_alive`,
`count_neighbors`, `advance`, `copy` and `render`. Adding or removing a cell off
the board raises `IndexError`.

### Other helpers

Each exercise module also exposes its calculation as plain functions:

- `football.record`, `losing_years`, `years_with_at_least`, `streaks`, `predict_season`
- `states.read_states`, `find_state`, `joined_before`, `joined_in`, `sort_by_year`
- `path.read_points`, `total_distance`
- `sayings.read_sayings`, `add_saying`, `search_sayings`, `save_sayings`
- `letterfreq.count_letters`, `scrabble_score`, `letter_percentages`
- `graph.evaluate`, `sample`, `plot_bar`
- `mortgage.amortize`, `minimum_payment`
- `table.multiplication_table`
- `points.football_points`
- `triangle.triangle_area`
- `menucalc.calculate`
- `polar.quadrant`, `radius`, `angle`
- `quadratics.discriminant`
- `grades.average`, `std_dev`
- `primes.sieve`, `format_primes`

## Commands

| Command | What it does |
| --- | --- |
| `labkit-crossword [words.txt [out.txt]]` | Builds a crossword from a word file, or from typed words when no file is given. With an output file it saves the solution, puzzle and clues there. Otherwise it opens a menu that includes a guess-the-word game. |
| `labkit-life [data file]` | With no file, plays interactively: `a x y`, `r x y`, `n`, `p` to run continuously, `q`. With a file, loads its `a x y` lines and runs continuously until interrupted. |
| `labkit-football` | Menu of questions about Notre Dame football records since 1900, including a prediction for the next season. |
| `labkit-grades` | Average and standard deviation of a fixed set of grades. |
| `labkit-primes` | Primes from 2 to 1000, ten per row. |
| `labkit-states` | Loads an `abbreviation,name,capital,year` file, then searches, filters or sorts the states. |
| `labkit-path` | Reads `x y` points from a file and reports the length of the path through them. |
| `labkit-sayings` | Loads a file of sayings, then displays, adds, searches and saves them. |
| `labkit-letterfreq` | Letter counts, Scrabble points and percentages for a file. |
| `labkit-graph` | Tabulates `y = e^(-x^2/20) sin(5x) + ln(\|x\|+1) cos(2x)` and plots it in ASCII. |
| `labkit-mortgage` | Amortization schedule for a loan. |
| `labkit-table` | Multiplication table of a chosen size. |
| `labkit-points` | Total points from touchdowns, extra points, field goals and safeties. |
| `labkit-triangle` | Area of a triangle from its three sides. |
| `labkit-menucalc` | Menu-driven four-function calculator. |
| `labkit-polar` | Quadrant, radius and angle of a point. |
| `labkit-quadratics` | Discriminant of integer triples, until `a = 0` is entered. |

Every command prompts on the terminal and reads its answers from standard input.
Each `main` function can also be called from Python without arguments.

## What it does not do

- There is no command for playing chess and no board display. The chess engine
  is a library only; a front end has to call `GameState.move_piece` itself.
- There are no graphical programs. Nothing here opens a window, draws shapes or
  fractals, or runs animations.