"""Completion candidates offered to an editor for the sequencing language."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from lcvgc.diatonic import ScaleType, diatonic_chords
from lcvgc.note import NoteName

__all__ = [
    "CompletionItem",
    "CompletionKind",
    "keyword_completions",
    "note_completions",
    "standard_cc_completions",
    "instrument_cc_completions",
    "identifier_completions",
    "diatonic_completions",
    "device_body_completions",
    "instrument_body_completions",
    "kit_body_completions",
    "clip_option_completions",
    "drum_clip_body_completions",
    "scene_body_keyword_completions",
    "session_entry_option_completions",
    "scale_type_completions",
    "play_keyword_completions",
    "arpeggio_direction_completions",
    "include_path_completions",
]


class CompletionKind(Enum):
    """Category of a completion candidate."""

    Keyword = "keyword"
    NoteName = "note_name"
    ChordName = "chord_name"
    CcAlias = "cc_alias"
    Identifier = "identifier"


@dataclass(frozen=True)
class CompletionItem:
    """One completion candidate: its text, an optional detail and its kind."""

    label: str
    detail: str | None
    kind: CompletionKind


_TOP_LEVEL_KEYWORDS = (
    "device",
    "instrument",
    "kit",
    "clip",
    "scene",
    "session",
    "tempo",
    "scale",
    "var",
    "include",
    "play",
    "stop",
)

_NOTE_NAMES = (
    "c", "c#", "db", "d", "d#", "eb", "e", "f", "f#",
    "gb", "g", "g#", "ab", "a", "a#", "bb", "b",
)

_STANDARD_CCS = (
    (1, "Modulation"),
    (7, "Volume"),
    (10, "Pan"),
    (11, "Expression"),
    (64, "Sustain"),
    (71, "Resonance"),
    (74, "Cutoff"),
)

_INSTRUMENT_BODY = (
    ("device", "MIDIデバイス参照"),
    ("channel", "MIDIチャンネル (1-16)"),
    ("note", "固定ノート (ドラム用)"),
    ("gate_normal", "通常Gate比率 (%)"),
    ("gate_staccato", "スタッカートGate比率 (%)"),
    ("cc", "CCマッピング (エイリアス CC番号)"),
    ("var", "ローカル変数定義"),
)

_CLIP_OPTIONS = (
    ("bars", "小節数"),
    ("time", "拍子 (例: 3/4)"),
    ("scale", "スケール指定"),
)

_DRUM_CLIP_BODY = (
    ("use", "ドラムキット参照"),
    ("resolution", "ステップ解像度 (例: 16)"),
)

_SESSION_ENTRY_OPTIONS = (
    ("repeat", "繰り返し回数"),
    ("loop", "無限ループ"),
)

_SCALE_TYPES = (
    ("major", "メジャー"),
    ("minor", "ナチュラルマイナー"),
    ("harmonic_minor", "ハーモニックマイナー"),
    ("melodic_minor", "メロディックマイナー"),
    ("dorian", "ドリアン"),
    ("phrygian", "フリジアン"),
    ("lydian", "リディアン"),
    ("mixolydian", "ミクソリディアン"),
    ("locrian", "ロクリアン"),
)

_ARPEGGIO_DIRECTIONS = (
    ("up", "上昇"),
    ("down", "下降"),
    ("updown", "上昇→下降"),
    ("random", "ランダム"),
)

_INCLUDE_EXTENSIONS = frozenset({".cvg", ".lcvgc"})


def _keywords(pairs: Iterable[tuple[str, str]]) -> list[CompletionItem]:
    return [CompletionItem(kw, detail, CompletionKind.Keyword) for kw, detail in pairs]


def keyword_completions() -> list[CompletionItem]:
    """Return the top-level block keywords."""
    return [CompletionItem(kw, None, CompletionKind.Keyword) for kw in _TOP_LEVEL_KEYWORDS]


def note_completions() -> list[CompletionItem]:
    """Return the 17 note names, sharps and flats included."""
    return [CompletionItem(n, None, CompletionKind.NoteName) for n in _NOTE_NAMES]


def standard_cc_completions() -> list[CompletionItem]:
    """Return common MIDI controller names with their CC numbers."""
    return [
        CompletionItem(name, f"CC {cc}", CompletionKind.CcAlias)
        for cc, name in _STANDARD_CCS
    ]


def instrument_cc_completions(
    mappings: Iterable[tuple[str, int]],
) -> list[CompletionItem]:
    """Return the CC aliases of an instrument, given as (alias, cc_number) pairs."""
    return [
        CompletionItem(alias, f"CC {cc_number}", CompletionKind.CcAlias)
        for alias, cc_number in mappings
    ]


def identifier_completions(names: Iterable[str], kind_label: str) -> list[CompletionItem]:
    """Return defined names as identifiers labelled with their kind."""
    return [CompletionItem(name, kind_label, CompletionKind.Identifier) for name in names]


def diatonic_completions(root: NoteName, scale_type: ScaleType) -> list[CompletionItem]:
    """Return the seven diatonic chords of a scale."""
    return [
        CompletionItem(chord.label, chord.detail, CompletionKind.ChordName)
        for chord in diatonic_chords(root, scale_type)
    ]


def device_body_completions() -> list[CompletionItem]:
    """Return the keywords valid inside a device block."""
    return _keywords([("port", "MIDIポート名")])


def instrument_body_completions() -> list[CompletionItem]:
    """Return the keywords valid inside an instrument block."""
    return _keywords(_INSTRUMENT_BODY)


def kit_body_completions() -> list[CompletionItem]:
    """Return the keywords valid inside a kit block."""
    return _keywords([("device", "MIDIデバイス参照")])


def clip_option_completions() -> list[CompletionItem]:
    """Return the option keywords valid inside a clip's ``[...]``."""
    return _keywords(_CLIP_OPTIONS)


def drum_clip_body_completions() -> list[CompletionItem]:
    """Return the keywords valid inside a drum clip."""
    return _keywords(_DRUM_CLIP_BODY)


def scene_body_keyword_completions() -> list[CompletionItem]:
    """Return the extra keywords valid inside a scene block."""
    return _keywords([("tempo", "テンポ変化 (絶対値 or +N)")])


def session_entry_option_completions() -> list[CompletionItem]:
    """Return the options of a session entry."""
    return _keywords(_SESSION_ENTRY_OPTIONS)


def scale_type_completions() -> list[CompletionItem]:
    """Return the available scale types."""
    return _keywords(_SCALE_TYPES)


def play_keyword_completions() -> list[CompletionItem]:
    """Return the keywords that may follow ``play``."""
    return _keywords([("session", "セッション再生")])


def arpeggio_direction_completions() -> list[CompletionItem]:
    """Return the arpeggio directions."""
    return _keywords(_ARPEGGIO_DIRECTIONS)


def include_path_completions(base_path: str | os.PathLike[str]) -> list[CompletionItem]:
    """Return includable files and subdirectories of ``base_path``.

    Files with a ``.cvg`` or ``.lcvgc`` extension are offered, as are
    directories not starting with a dot (with a trailing ``/``). A directory
    that cannot be read gives no candidates.
    """
    try:
        entries = sorted(Path(base_path).iterdir())
    except OSError:
        return []

    items = []
    for path in entries:
        if path.is_file():
            if path.suffix in _INCLUDE_EXTENSIONS:
                items.append(
                    CompletionItem(path.name, "include file", CompletionKind.Identifier)
                )
        elif path.is_dir() and not path.name.startswith("."):
            items.append(
                CompletionItem(f"{path.name}/", "directory", CompletionKind.Identifier)
            )
    return items