# fastcopy

Building blocks for picking text off a terminal screen by typing short hint
labels, in the style of a "fast copy" mode for a terminal multiplexer.

Named regular expressions find interesting text (IP addresses, git SHAs,
paths, UUIDs, hex colours, ISO dates, long integers). Every unique matched
text gets a short prefix-free label, and the chosen text is handed to an
action command.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `fastcopy.huffman.label(alphabet_size, freqs)` returns, for each item, a
  list of alphabet indexes forming a prefix-free label, built with an n-ary
  Huffman code; items with higher frequencies get shorter labels. An
  alphabet smaller than two raises `ValueError`.
- `fastcopy.model` holds the value types `Range` (half-open `[start, end)`,
  with `len()`), `Match` (matcher name and range), `Selection` (text,
  matcher names, shift flag) and `Style` (opaque style values handed to a
  renderer).
- `fastcopy.hint.generate_hints(alphabet, text, matches)` groups matches by
  their text, sorts the texts and labels each group. `Hint.annotations(
  user_input, style)` returns `OverlayAnnotation` and `StyleAnnotation`
  values describing how the hint is drawn for the input typed so far.
- `fastcopy.widget.WidgetConfig(text, matches, hint_alphabet, handler,
  style).build()` returns a `Widget`. `Widget.handle_event(KeyEvent(...))`
  returns whether the event was consumed:
  - `Key.RUNE` adds a character to the input; an upper-case character (or
    `shift=True`) marks the selection as shifted. Typing a complete label
    selects its hint.
  - `Key.BACKSPACE` / `Key.BACKSPACE2` remove the last typed character.
  - `Key.TAB` enters multi-select mode, or, when already in it, confirms the
    selected hints. `Key.ENTER` confirms only in multi-select mode.
  
  The handler is called with a `Selection`; in multi-select mode the texts
  are joined with spaces and the matcher names are sorted.
  `Widget.annotations()` gives the current annotations to draw.
- `fastcopy.alphabet.validate_alphabet(alphabet)` raises `AlphabetError`
  unless the alphabet has at least two characters and no duplicates;
  `parse_alphabet` validates and returns it. `DEFAULT_ALPHABET` is `a`–`z`.
- `fastcopy.config` holds `Config`, `Regexes`, `DEFAULT_REGEXES` and
  `default_config(cfg)`. `parse_flags(argv)` reads the flags `-pane`,
  `-action`, `-shift-action`, `-alphabet`, `-regex NAME:REGEX` (repeatable),
  `-verbose`, `-log` and `-tmux` (default `tmux`), each also accepted with
  two dashes; bad flags raise `ConfigError`. `Config.flags()` turns a
  configuration back into arguments that `parse_flags` reads again, and
  `Config.fill_from(other)` fills unset values without overwriting set ones.
- `fastcopy.action.ActionFactory().new(NewActionRequest(action, dir,
  target_pane_id))` turns a shell-style command line into an action. If one
  argument is `{}` the selected text takes its place (`ArgAction`);
  otherwise the text is sent on standard input (`StdinAction`). An empty or
  unparsable command raises `ActionError`. `run(selection)` runs the
  command, logs its output one line per entry under the command's name,
  sets `FASTCOPY_REGEX_NAME` and `FASTCOPY_TARGET_PANE_ID` in its
  environment, and raises `subprocess.CalledProcessError` if it fails.
- `fastcopy.logger.Logger` is a small thread-safe leveled logger
  (`Level.DEBUG`, `INFO`, `ERROR`, `DISCARD`); `LogWriter` is a file-like
  object that turns written output into one log entry per line.
- Smaller helpers: `fastcopy.must.not_errorf`, `fastcopy.paniclog.handle`
  and `recover`, `fastcopy.stringobj.Builder`, `fastcopy.envtest` (a fake
  environment) and `fastcopy.iotest.writer`.

## Example

```python
from fastcopy.model import Match, Range
from fastcopy.hint import generate_hints

text = "foo bar baz qux"
matches = [Match("p", Range(0, 3)), Match("q", Range(4, 6)), Match("r", Range(8, 10))]
for hint in generate_hints("abc", text, matches):
    print(hint.label, hint.text)
```

## What this package does not do

There is no command to run and no terminal screen: the package does not
draw the widget, read keys from a terminal, or talk to tmux to capture,
swap or resize panes, and it does not load settings from tmux options. It
provides the labelling, key handling, configuration and action pieces that
such a program is built from.