# wordlenet

wordlenet is a word-guessing game that you play over the network. One machine
runs the server. Players connect from a terminal, create an account, log in,
and get six attempts to find the current five-letter word.

- A **green** letter is in the right position.
- A **yellow** letter is in the word, but in a different position.

## Installation

```
pip install .
```

This installs the `wordle` command. The package needs only the standard library.

## Running a server

```
wordle serve
```

The server uses the working directory. It reads its dictionary from
`words.txt`, which holds one word per line. Only the first five characters of
each line are used, and blank lines are skipped. It keeps player records in
`records/<username>.txt` and each game's board in
`records/games/<username>.<word>.txt`. It creates these directories when it
first needs them.

The server listens on TCP port 9034 on all interfaces. When it starts, it
prints the word it has chosen. To pick a word, it takes a random starting
letter from those in the dictionary, then a random word that begins with that
letter.

When a player starts a game and the current word is at least 8,640,000,000 ms
old (100 days), the server replaces it with a new one.

## Playing

Create an account:

```
wordle signup <username>:<password> <host>
```

Log in and play:

```
wordle login <username>:<password> <host>
```

The client always connects to port 9034. After you log in, this menu appears:

```
[p]lay    [s]tats    [q]uit
```

- `p` or `play` starts or resumes the game for the current word. At each
  prompt, type a five-letter word, or type `exit` to go back to the menu.
  A guess must be a word from the server's dictionary. If the game is already
  won or lost, the server shows the board and asks you to wait for the next word.
- `s` or `score` shows your statistics: games played, games won, longest win
  streak, current win streak and win ratio.
- `q` or `quit` leaves the game.

Run `wordle` with no arguments to print the rules and usage.

## Using it as a library

The game logic does not depend on the network, so you can drive it directly:

- `wordlenet.records.RecordStore` keeps accounts, the status of each word
  (`GameStatus`), statistics (`Stats`) and game boards as plain-text files
  under one directory. Problems with the records raise `RecordError`.
- `wordlenet.sessions.SessionRegistry` tracks which user is logged in on
  which connection.
- `wordlenet.words.WordList` loads the dictionary. `wordlenet.words.DailyWord`
  holds the current answer and replaces it after its period. The clock, the
  random generator and the period can all be injected.
- `wordlenet.game.GameService` answers signup, login, play, guess and stats
  requests and returns a `Reply`. `score_guess` colours a guess as `Tile`
  values, `render_guess` and `render_win` turn guesses into coloured board
  lines, and `split_message` splits a message on runs of `<`.
- `wordlenet.server.WordleServer` serves a `GameService` over TCP.
  `handle_message` answers a single request without a socket.
  `wordlenet.server.serve(root, host, port)` starts a server over a chosen
  directory, host and port.
- `wordlenet.client.WordleClient` runs the terminal menu over any object that
  has `sendall` and `recv`.

## What it does not do

- It has no leaderboard. The menu accepts `l`, but it does nothing.
- Passwords are stored in the record files as plain text and sent over the
  network unencrypted. The protocol has no TLS.
- The `wordle` command has no options for the port, host or data directory.
  To change them, call `wordlenet.server.serve` from Python.

## Development

```
pip install -e .[test]
pytest
```