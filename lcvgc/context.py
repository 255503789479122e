"""Working out what kind of completion fits the cursor position."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lcvgc.textpos import (
    brace_depth_at,
    clip_has_use,
    find_enclosing_block_keyword,
    line_text_to_cursor,
)

__all__ = ["ContextKind", "CompletionContext", "determine_completion_context"]


class ContextKind(Enum):
    """Where the cursor sits, as far as completion is concerned."""

    TopLevel = "top_level"
    AfterBlockKeyword = "after_block_keyword"
    DeviceBody = "device_body"
    InstrumentBody = "instrument_body"
    InstrumentAfterDevice = "instrument_after_device"
    InstrumentAfterNote = "instrument_after_note"
    NumberExpected = "number_expected"
    KitBody = "kit_body"
    KitAfterDevice = "kit_after_device"
    PitchedClipBody = "pitched_clip_body"
    DrumClipBody = "drum_clip_body"
    ClipAfterUse = "clip_after_use"
    SceneBody = "scene_body"
    SessionBody = "session_body"
    SessionAfterBracket = "session_after_bracket"
    AfterTempo = "after_tempo"
    AfterScale = "after_scale"
    AfterScaleNote = "after_scale_note"
    AfterPlay = "after_play"
    AfterPlaySession = "after_play_session"
    AfterStop = "after_stop"
    AfterInclude = "after_include"
    AfterVar = "after_var"
    ClipOption = "clip_option"
    ClipOptionAfterScale = "clip_option_after_scale"
    ClipOptionAfterScaleNote = "clip_option_after_scale_note"


@dataclass(frozen=True)
class CompletionContext:
    """A completion context; ``used_options`` lists clip options already given."""

    kind: ContextKind
    used_options: tuple[str, ...] = ()


def _ctx(kind: ContextKind) -> CompletionContext:
    return CompletionContext(kind)


def _extract_used_options(text: str) -> tuple[str, ...]:
    """Return the first word of every closed ``[...]`` group in ``text``."""
    used = []
    rest = text
    while (open_pos := rest.find("[")) >= 0:
        close = rest.find("]", open_pos)
        if close < 0:
            break
        words = rest[open_pos + 1 : close].split()
        if words:
            used.append(words[0])
        rest = rest[close + 1 :]
    return tuple(used)


def _clip_bracket_option(
    after_bracket: str, used_options: tuple[str, ...]
) -> CompletionContext:
    trimmed = after_bracket.lstrip()
    if trimmed.startswith("scale "):
        after_scale = trimmed[len("scale ") :].lstrip()
        if " " in after_scale:
            return _ctx(ContextKind.ClipOptionAfterScaleNote)
        return _ctx(ContextKind.ClipOptionAfterScale)
    return CompletionContext(ContextKind.ClipOption, used_options)


_SIMPLE_TOPLEVEL = {
    "device": ContextKind.AfterBlockKeyword,
    "instrument": ContextKind.AfterBlockKeyword,
    "kit": ContextKind.AfterBlockKeyword,
    "scene": ContextKind.AfterBlockKeyword,
    "session": ContextKind.AfterBlockKeyword,
    "tempo": ContextKind.AfterTempo,
    "stop": ContextKind.AfterStop,
    "include": ContextKind.AfterInclude,
    "var": ContextKind.AfterVar,
}


def _toplevel_context(trimmed: str) -> CompletionContext:
    if not trimmed:
        return _ctx(ContextKind.TopLevel)

    parts = trimmed.split(" ", 2)
    keyword = parts[0]

    if keyword == "clip":
        if len(parts) >= 3:
            rest = parts[2]
            last_bracket = rest.rfind("[")
            if last_bracket >= 0 and "]" not in rest[last_bracket:]:
                used = _extract_used_options(rest[:last_bracket])
                return _clip_bracket_option(rest[last_bracket + 1 :], used)
            return _ctx(ContextKind.AfterBlockKeyword)
        if len(parts) == 2:
            return _ctx(ContextKind.AfterBlockKeyword)
        return _ctx(ContextKind.TopLevel)

    if keyword == "scale":
        if len(parts) >= 3:
            return _ctx(ContextKind.AfterScaleNote)
        if len(parts) == 2:
            return _ctx(ContextKind.AfterScale)
        return _ctx(ContextKind.TopLevel)

    if keyword == "play":
        if len(parts) >= 3 and parts[1] == "session":
            return _ctx(ContextKind.AfterPlaySession)
        if len(parts) >= 2:
            return _ctx(ContextKind.AfterPlay)
        return _ctx(ContextKind.TopLevel)

    kind = _SIMPLE_TOPLEVEL.get(keyword)
    if kind is not None and len(parts) >= 2:
        return _ctx(kind)
    return _ctx(ContextKind.TopLevel)


def _instrument_context(trimmed: str) -> CompletionContext:
    if not trimmed:
        return _ctx(ContextKind.InstrumentBody)
    if trimmed.startswith("device "):
        return _ctx(ContextKind.InstrumentAfterDevice)
    if trimmed.startswith("note "):
        return _ctx(ContextKind.InstrumentAfterNote)
    if trimmed.startswith(("channel ", "gate_normal ", "gate_staccato ")):
        return _ctx(ContextKind.NumberExpected)
    if trimmed.startswith("cc "):
        # Aliases and CC numbers are free input.
        return _ctx(ContextKind.AfterBlockKeyword)
    if trimmed.startswith("var "):
        return _ctx(ContextKind.AfterVar)
    return _ctx(ContextKind.InstrumentBody)


def _kit_context(trimmed: str, depth: int) -> CompletionContext:
    if not trimmed:
        return _ctx(ContextKind.KitBody)
    if depth > 1:
        return _ctx(ContextKind.NumberExpected)
    if trimmed.startswith("device "):
        return _ctx(ContextKind.KitAfterDevice)
    return _ctx(ContextKind.KitBody)


def _clip_context(
    trimmed: str, source: str, brace_pos: int, cursor_offset: int
) -> CompletionContext:
    line_start = source.rfind("\n", 0, cursor_offset) + 1
    full_line = source[line_start:cursor_offset]
    bracket_pos = full_line.rfind("[")
    if bracket_pos >= 0 and "]" not in full_line[bracket_pos:]:
        used = _extract_used_options(full_line[:bracket_pos])
        return _clip_bracket_option(full_line[bracket_pos + 1 :], used)

    if trimmed.startswith("use "):
        return _ctx(ContextKind.ClipAfterUse)
    if trimmed.startswith("resolution "):
        return _ctx(ContextKind.NumberExpected)
    if clip_has_use(source, brace_pos, cursor_offset):
        return _ctx(ContextKind.DrumClipBody)
    return _ctx(ContextKind.PitchedClipBody)


def _scene_context(trimmed: str) -> CompletionContext:
    if trimmed.startswith("tempo "):
        return _ctx(ContextKind.AfterTempo)
    return _ctx(ContextKind.SceneBody)


def _session_context(trimmed: str) -> CompletionContext:
    bracket_pos = trimmed.rfind("[")
    if bracket_pos >= 0 and "]" not in trimmed[bracket_pos:]:
        return _ctx(ContextKind.SessionAfterBracket)
    return _ctx(ContextKind.SessionBody)


def determine_completion_context(source: str, offset: int) -> CompletionContext:
    """Return the completion context at ``offset`` in ``source``."""
    depth, last_open = brace_depth_at(source, offset)
    trimmed = line_text_to_cursor(source, offset).lstrip()

    if depth <= 0:
        return _toplevel_context(trimmed)
    if last_open is None:
        return _ctx(ContextKind.TopLevel)

    keyword = find_enclosing_block_keyword(source, last_open)
    if keyword == "device":
        return _ctx(ContextKind.DeviceBody)
    if keyword == "instrument":
        return _instrument_context(trimmed)
    if keyword == "kit":
        return _kit_context(trimmed, depth)
    if keyword == "clip":
        return _clip_context(trimmed, source, last_open, offset)
    if keyword == "scene":
        return _scene_context(trimmed)
    if keyword == "session":
        return _session_context(trimmed)
    return _ctx(ContextKind.TopLevel)