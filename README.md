# feedcat

Feed Cat is a small rhythm game that runs in a terminal. Notes fall down
four lanes, and you hit each one with the arrow key for its lane as it
reaches the judgement line.

## Installing

```
pip install .
```

The game uses only the Python standard library.

## Playing

```
feedcat
```

To play without music:

```
feedcat --mute
```

The title menu offers three choices: start a game, show the character
screen, or quit. Move through it with the up and down arrows and press
Enter to choose. The character screen shows an animated cat; press any key
and then Enter to go back to the title.

Starting a game shows the map screen. There is one map. Choose START to
play it, or BACK to return to the title.

On the stage:

- Press **Enter** to start the song. Notes begin to fall about three
  seconds later.
- The lanes run, from left to right, as **← ↑ ↓ →**.
- Press **p** to pause, and **Enter** to carry on.
- The song ends after 70 seconds of play. Then press **q** to leave the
  game.

## Scoring

A hit on a note that is exactly on the judgement line is a PERFECT and
scores 700 points. A hit one step late is a GREAT for 400, and a hit one
step early is a GOOD for 100. Each hit adds one to the combo. A key press
with no note in reach in its lane sets the combo back to zero.

The score, the combo, the running time and the last judgement are shown
beside the playfield.

## Music

If the files `title_BGM.wav` and `map_1.wav` are in the working directory,
they are looped as music: the first at the title, the second on the map
screen and during the song. On Windows they are played with `winsound`;
elsewhere the game looks for `afplay`, `paplay` or `aplay` on the path. If
neither a file nor a player is found, the game runs silently.

## Using the parts

- `feedcat.chart.build_chart(sync)` returns the song's `Chart`, a read-only
  map of step number to `Lane`. `Chart.visible_rows` and
  `Chart.hit_window` give what the playfield shows and what a key press can
  hit at a given step.
- `feedcat.game.Game` holds one round: its state (`GameState`), score,
  combo and position. `start`, `pause`, `update`, `advance`, `judge` and
  `render` drive it; `judge` returns a `Judgement` or `None` for a miss.
- `feedcat.terminal.Terminal` is a context manager that puts the console
  into key-at-a-time mode and draws with ANSI escape sequences;
  `SoundPlayer` loops a sound file in the background.
- `feedcat.app.main` starts the whole game at the title screen.

## What it does not do

The game keeps no record of scores between runs, and has a single map and
song.

## Tests

```
pip install .[test]
pytest
```