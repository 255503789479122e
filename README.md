# lcvgc

Building blocks for the lcvgc live-coding music language: MIDI note and
chord arithmetic, CC interpolation, gate timing, drum velocities and
probabilities, MIDI message encoding, output port management and port
hot-plug monitoring, plus the helpers an editor needs to offer
context-aware completions.

## Installation

```
pip install lcvgc
```

MIDI port access goes through `mido`, which needs a backend such as
`python-rtmidi` installed to reach real ports.

## Notes and chords

```python
from lcvgc.note import NoteName, note_number
from lcvgc.chord import ChordSuffix, chord_intervals, chord_notes

note_number(NoteName.C, 4)                     # 60
note_number(NoteName.B, 9)                     # 131 (not clamped)
chord_intervals(ChordSuffix.Dom7)              # [0, 4, 7, 10]
chord_notes(NoteName.A, 4, ChordSuffix.Min)    # [69, 72, 76]
```

`NoteName` has sharp and flat spellings (`Cs`, `Db`, ...); enharmonic
spellings share a `semitone`. Notes above 127 in a chord are clamped to 127.

## Timing and automation

```python
from lcvgc.gate import note_duration_ms, calculate_gate
from lcvgc.cc import interpolate_linear, interpolate_exponential

note_duration_ms(120.0, 4, False)   # 500
note_duration_ms(120.0, 4, True)    # 750
calculate_gate(500, 80)             # GateResult(on_duration_ms=400, off_duration_ms=100)
interpolate_linear(0, 100, 5)       # [0, 25, 50, 75, 100]
interpolate_exponential(0, 100, 2)  # [0, 100]
```

A gate of 100 % is legato; any other gate leaves at least 5 ms of silence.
A gate percentage outside 0-100 raises `ValueError`. Interpolated values are
rounded and clamped to 0-127; zero steps give `[]` and one step gives `[end]`.

## Drums

```python
import random
from lcvgc.velocity import HitSymbol, hit_velocity, clamp_velocity
from lcvgc.probability import should_trigger, apply_probability_mask

hit_velocity(HitSymbol.Accent)                        # 127
clamp_velocity(200)                                   # 127
apply_probability_mask(4, [0, 0], random.Random(42))  # [False, False, True, True]
```

Probability values run 0-9 (0 % to 90 %); `None`, or a step past the end of
the list, always triggers.

## MIDI messages and output

```python
from lcvgc.message import NoteOn, ControlChange
from lcvgc.port import PortManager, list_ports

NoteOn(channel=9, note=36, velocity=127).to_bytes()   # b'\x99$\x7f'

print(list_ports())
ports = PortManager()
ports.connect("synth", "IAC Driver Bus 1")
ports.send("synth", ControlChange(channel=0, cc=74, value=64).to_bytes())
print(ports.connected_names())                        # ['synth']
ports.disconnect("synth")
```

`lcvgc.message` also has `NoteOff` and `ProgramChange`. Failures raise
`PortNotFoundError`, `MidiConnectionError` or `MidiSendError`, all
subclasses of `lcvgc.errors.MidiError`; sending to a name that is not
connected raises `PortNotFoundError`.

## Port monitoring

`lcvgc.monitor.log_startup_ports()` logs the output and input ports present.
`collect_ports()` returns a `PortSnapshot` (or `None` if enumeration fails),
and `detect_changes(prev, curr)` logs ports connected or disconnected
between two snapshots and returns whether anything changed.

```python
import asyncio
from lcvgc.monitor import PortMonitorConfig, run_port_monitor

task = asyncio.create_task(run_port_monitor(PortMonitorConfig(interval_ms=2000)))
# ... later
task.cancel()
```

Messages go to the standard `logging` logger `lcvgc.monitor`.

## Editor completion

```python
from lcvgc.context import ContextKind, determine_completion_context
from lcvgc.completion import diatonic_completions, identifier_completions
from lcvgc.diatonic import ScaleType
from lcvgc.note import NoteName

source = "instrument bass {\n  device "
ctx = determine_completion_context(source, len(source))
ctx.kind is ContextKind.InstrumentAfterDevice   # True

source = "clip bass_a [bars 4] ["
determine_completion_context(source, len(source)).used_options   # ('bars',)

[item.label for item in diatonic_completions(NoteName.C, ScaleType.Major)]
# ['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim']
```

`lcvgc.completion` offers fixed candidate lists (`keyword_completions`,
`note_completions`, `standard_cc_completions`, `scale_type_completions`,
the `*_body_completions` functions and more), `identifier_completions` for
names you supply, `instrument_cc_completions` for `(alias, cc_number)`
pairs, and `include_path_completions(directory)` for `.cvg`/`.lcvgc` files
and non-hidden subdirectories.

`lcvgc.textpos` holds the lower-level text helpers: `brace_depth_at`,
`find_enclosing_block_keyword`, `line_text_to_cursor`, `clip_has_use`,
`word_at_offset` and `offset_to_line_col`.

## What this package does not do

It does not parse lcvgc source into blocks, keep a registry of defined
names, play sessions or run a language server. There is no command-line
program. `determine_completion_context` only says what kind of candidates
fit the cursor; choosing the names to offer (devices, clips, scenes and so
on) and turning them into candidates with the `lcvgc.completion` functions
is left to the caller.

## Tests

```
pip install -e .[test]
pytest
```