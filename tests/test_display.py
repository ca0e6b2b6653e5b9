import io
import json

import pytest

from moonclock import display, lib
from moonclock.api import BinaryClockState, BinaryValue, TimeComponents, state_from_time, to_binary
from moonclock.display import DisplayRegistry


def make_state(h, m, s):
    return state_from_time(TimeComponents(h, m, s))


def moons_to_bits(text):
    return text.replace(display.FULL_MOON, "1").replace(display.DARK_MOON, "0")


def test_compact_matches_documented_example():
    assert display.render_compact(make_state(12, 34, 56)) == "12:34:56 [001 0010 : 011 0100 : 101 0110]"


def test_compact_prints_line(capsys):
    state = make_state(12, 34, 56)
    display.compact(state, None)
    assert capsys.readouterr().out == display.render_compact(state) + "\n"


def test_ascii_rendering_rows():
    lines = display.render_ascii(make_state(23, 59, 59)).splitlines()
    assert lines[0] == "Binary Clock (ASCII)"
    assert lines[1] == "Time: 23:59:59"
    assert lines[2] == ""
    assert lines[3] == "Hours   : " + lib.to_binary(2, 3) + " " + lib.to_binary(3, 4)
    assert lines[4] == "Minutes : " + lib.to_binary(5, 3) + " " + lib.to_binary(9, 4)
    assert lines[5] == "Seconds : " + lib.to_binary(5, 3) + " " + lib.to_binary(9, 4)


def test_emoji_rows_match_ascii_rows():
    state = make_state(14, 30, 45)
    emoji_lines = display.render_emoji(state).splitlines()
    ascii_lines = display.render_ascii(state).splitlines()
    assert emoji_lines[0] == f"{display.FULL_MOON} Binary Clock {display.DARK_MOON}"
    assert emoji_lines[1] == ascii_lines[1]
    assert [moons_to_bits(line) for line in emoji_lines[3:]] == ascii_lines[3:]


def test_console_functions_print(capsys):
    state = make_state(9, 5, 3)
    display.console_emoji(state, None)
    assert capsys.readouterr().out == display.render_emoji(state)
    display.console_ascii(state, None)
    assert capsys.readouterr().out == display.render_ascii(state)


def test_console_functions_ignore_missing_state(capsys):
    display.console_emoji(None, None)
    display.console_ascii(None, None)
    display.compact(None, None)
    display.display_json(None, None)
    assert capsys.readouterr().out == ""


def test_json_structure():
    state = make_state(14, 30, 45)
    data = json.loads(display.render_json(state))
    assert data["timestamp"] == state.timestamp
    assert data["time"] == "14:30:45"
    assert data["binary"]["hours"]["tens"] == [int(b) for b in state.hours_tens.bits]
    assert data["binary"]["minutes"]["units"] == [int(b) for b in state.minutes_units.bits]
    assert data["binary"]["seconds"]["units"] == [int(b) for b in state.seconds_units.bits]
    assert len(data["binary"]["seconds"]["tens"]) == 3


def test_display_json_to_stream_and_stdout(capsys):
    state = make_state(1, 2, 3)
    buffer = io.StringIO()
    display.display_json(state, buffer)
    assert buffer.getvalue() == display.render_json(state)
    assert capsys.readouterr().out == ""
    display.display_json(state, None)
    assert capsys.readouterr().out == display.render_json(state)


def test_get_time_string_round_trip():
    assert display.get_time_string(make_state(7, 8, 9)) == "07:08:09"
    with pytest.raises(TypeError):
        display.get_time_string(None)


@pytest.mark.parametrize("value,bits", [(0, 3), (7, 4), (5, 3), (63, 6), (1, 1)])
def test_binary_to_string_formats(value, bits):
    binary = to_binary(value, bits)
    assert display.binary_to_string(binary, "0") == lib.to_binary(value, bits)
    assert display.binary_to_string(binary, "1") == lib.to_binary(value, bits)
    assert moons_to_bits(display.binary_to_string(binary, "e")) == lib.to_binary(value, bits)
    assert display.binary_to_string(binary, "d") == str(value)


def test_binary_to_string_errors():
    with pytest.raises(ValueError):
        display.binary_to_string(to_binary(3, 2), "x")
    with pytest.raises(ValueError):
        display.binary_to_string(BinaryValue(bit_count=0, bits=(), decimal_value=0), "0")
    with pytest.raises(TypeError):
        display.binary_to_string(None, "0")


def test_registry_calls_in_slot_order_with_context():
    registry = DisplayRegistry()
    calls = []
    first = registry.register(lambda s, c: calls.append(("a", c)), "ctx-a")
    second = registry.register(lambda s, c: calls.append(("b", c)), "ctx-b")
    assert (first, second) == (0, 1)
    registry.unregister(first)
    third = registry.register(lambda s, c: calls.append(("c", c)), None)
    assert third == 2
    registry.update_all_with_state(make_state(1, 2, 3))
    assert calls == [("c", None), ("b", "ctx-b")]


def test_registry_passes_state():
    registry = DisplayRegistry()
    seen = []
    registry.register(lambda s, c: seen.append(s), None)
    state = make_state(10, 20, 30)
    registry.update_all_with_state(state)
    registry.update_all_with_state(None)
    assert seen == [state]


def test_registry_update_all_uses_current_state():
    registry = DisplayRegistry()
    seen = []
    registry.register(lambda s, c: seen.append(s), None)
    registry.update_all()
    assert len(seen) == 1
    assert isinstance(seen[0], BinaryClockState)
    assert seen[0].timestamp > 0
    assert seen[0].hours_tens.decimal_value <= 2


def test_registry_capacity():
    registry = DisplayRegistry()
    ids = [registry.register(lambda s, c: None, None) for _ in range(display.MAX_REGISTERED_DISPLAYS)]
    assert ids == list(range(display.MAX_REGISTERED_DISPLAYS))
    with pytest.raises(RuntimeError):
        registry.register(lambda s, c: None, None)
    registry.unregister(5)
    assert registry.register(lambda s, c: None, None) == display.MAX_REGISTERED_DISPLAYS


def test_registry_errors():
    registry = DisplayRegistry()
    with pytest.raises(TypeError):
        registry.register(None, None)
    with pytest.raises(KeyError):
        registry.unregister(-1)
    with pytest.raises(KeyError):
        registry.unregister(0)
    registration_id = registry.register(lambda s, c: None, None)
    registry.unregister(registration_id)
    with pytest.raises(KeyError):
        registry.unregister(registration_id)


def test_unregistered_display_not_called():
    registry = DisplayRegistry()
    calls = []
    registration_id = registry.register(lambda s, c: calls.append(s), None)
    registry.unregister(registration_id)
    registry.update_all_with_state(make_state(0, 0, 0))
    assert calls == []


def test_module_level_registry():
    seen = []
    registration_id = display.register(lambda s, c: seen.append(c), "shared")
    try:
        state = make_state(4, 5, 6)
        display.update_all_with_state(state)
        display.update_all()
    finally:
        display.unregister(registration_id)
    assert seen == ["shared", "shared"]
    display.update_all_with_state(make_state(4, 5, 6))
    assert seen == ["shared", "shared"]