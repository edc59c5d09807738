from typing import Dict, Optional

from config import settings
from constants import CARE_INSTRUCTIONS


def extract_care_note(text: str, term: str, context_chars: Optional[int] = None) -> Optional[str]:
    """Look around the first mention of ``term`` for preparation instructions."""
    idx = text.find(term)
    if idx == -1:
        return None

    width = settings.note_context_chars if context_chars is None else context_chars
    start = max(0, idx - width)
    end = min(len(text), idx + len(term) + width)
    context = text[start:end]

    instructions = [
        label for keywords, label in CARE_INSTRUCTIONS
        if all(keyword in context for keyword in keywords)
    ]
    if not instructions:
        return None

    formatted = ", ".join(instructions)
    return formatted[0].upper() + formatted[1:]


def record_care_note(notes: Dict[str, str], material: str, text: str, term: str) -> None:
    # First note found for a material sticks for the whole batch.
    if material in notes:
        return
    note = extract_care_note(text, term)
    if note:
        notes[material] = note
