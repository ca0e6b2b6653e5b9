# moonclock

A binary clock for the terminal. Each digit of the current local time is shown
as a row of bits. Hours, minutes and seconds are each split into tens and units.
The tens digit uses 3 bits and the units digit uses 4. A 0 bit is shown as 🌚
and a 1 bit as 🌝.

## Installation

    pip install .

## Command line

    moonclock                          # single emoji output (default)
    moonclock --display=binary         # 0s and 1s
    moonclock --display=json           # JSON document
    moonclock --display=raw            # raw state data
    moonclock --loop                   # redraw every second, Ctrl+C to stop
    moonclock --display=json --loop    # continuous JSON output
    moonclock --help                   # or -h

In loop mode the screen is cleared before each redraw, except in JSON mode.
Ctrl+C prints "Binary clock stopped." and exits with status 0.

An unknown option or display mode prints an error to standard error and exits
with status 1.

## Library

### Core data: `moonclock.api`

This module holds the clock data and does no printing.

```python
from moonclock.api import TimeComponents, state_from_time, to_binary, to_decimal

state = state_from_time(TimeComponents(14, 30, 45))
state.hours_tens.bits      # (False, False, True)
state.seconds_units.bits   # (False, True, False, True)
state.digits()             # the six BinaryValue digits, hours tens first

value = to_binary(7, 4)    # BinaryValue(bit_count=4, bits=(False, True, True, True), decimal_value=7)
to_decimal(value)          # 7
```

Each `BinaryValue` holds its bits with the most significant bit first.

- `to_binary(value, bit_count)` truncates values that are too large for the bit count.
- Hours must be 0–23, and minutes and seconds 0–59. Any other value raises
  `InvalidTimeError`.
- Bit counts outside 1–6 raise `InvalidBitCountError`.
- `get_current_time()` and `get_current_state()` read the local system time.
  They raise `SystemTimeError` if the clock cannot be read.

All these errors derive from `BinaryClockError`, and each one carries an
`ErrorCode`. `get_error_string(code)` returns the message for a code.
`get_version()` returns `"1.0.0"`.

### Rendering: `moonclock.display`

```python
from moonclock.api import get_current_state
from moonclock.display import render_emoji, render_compact, get_time_string, binary_to_string

state = get_current_state()
print(render_emoji(state), end="")
print(render_compact(state))   # e.g. "14:30:45 [001 0100 : 011 0000 : 100 0101]"
get_time_string(state)         # e.g. "14:30:45"
binary_to_string(state.hours_units, "e")   # moons; "0"/"1" for bits, "d" for decimal
```

These functions render a state as a string:

- `render_ascii` draws the bits as 0s and 1s.
- `render_json` produces a JSON document.

These functions print a state directly, so they can be used as display callbacks:

- `console_emoji`
- `console_ascii`
- `compact`
- `display_json`, which writes to the given file object, or to stdout when none is given.

A `DisplayRegistry` holds up to 16 callbacks. The module-level functions work on
a shared registry:

- `register(display_fn, context)` returns an id. It raises `RuntimeError` when
  all slots are full.
- `unregister(registration_id)` removes a callback. It raises `KeyError` for an
  unknown id.
- `update_all()` calls every registered callback with the current state.
- `update_all_with_state(state)` calls every registered callback with the given state.

### String helpers: `moonclock.lib`

- `to_binary(value, bits)` returns the lowest `bits` bits of `value` as a string
  such as `"0101"`.
- `display_binary("1010")` prints that string as moons.

## Tests

    pip install .[test]
    pytest