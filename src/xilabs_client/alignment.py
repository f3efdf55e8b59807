"""Word timing from character-level alignment data.

The with-timestamps endpoints (and the WebSocket stream with
``sync_alignment``) return an ``alignment`` object of parallel character and
time arrays; these helpers fold it into per-word timings.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class WordTiming:
    """Timing information for a single word."""

    word: str
    start_time: float  # seconds from audio start
    end_time: float


def parse_alignment_to_words(
    characters: list[str],
    start_times: list[float],
    end_times: list[float],
) -> list[WordTiming]:
    """Convert character-level alignment to word-level timing.

    Args:
        characters: List of individual characters
        start_times: Start time for each character in seconds
        end_times: End time for each character in seconds

    Returns:
        List of WordTiming objects, one per whitespace-separated word
    """
    words: list[WordTiming] = []
    current = ""
    word_start: float | None = None
    word_end = 0.0

    for char, start, end in zip(characters, start_times, end_times):
        if char.isspace():
            if current:
                words.append(WordTiming(word=current, start_time=word_start, end_time=word_end))
                current = ""
                word_start = None
            continue

        if word_start is None:
            word_start = start
        current += char
        word_end = end

    if current:
        words.append(WordTiming(word=current, start_time=word_start, end_time=word_end))

    return words


def words_from_alignment(alignment: Mapping[str, Any] | None) -> list[WordTiming]:
    """Word timings from an ``alignment``/``normalized_alignment`` object.

    Accepts both the REST field names (``character_start_times_seconds``) and
    the WebSocket ones (``charStartTimesMs``, in milliseconds).
    """
    if not alignment:
        return []

    characters = alignment.get("characters") or alignment.get("chars") or []
    if "character_start_times_seconds" in alignment:
        starts = alignment.get("character_start_times_seconds", [])
        ends = alignment.get("character_end_times_seconds", [])
    else:
        starts_ms = alignment.get("charStartTimesMs", [])
        durations_ms = alignment.get("charDurationsMs", [])
        starts = [ms / 1000 for ms in starts_ms]
        ends = [(ms + dur) / 1000 for ms, dur in zip(starts_ms, durations_ms)]

    return parse_alignment_to_words(characters, starts, ends)
