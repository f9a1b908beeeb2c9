"""
Choice formatting for interactive connection selection
"""
from typing import List, Optional, Sequence

from ...core.constants import LABEL_HEADER
from .models import ConnectionChoice, ConnectionStore


def matches(key: str, filter_text: str) -> bool:
    """Case-insensitive substring match of a label against filter text"""
    return filter_text.lower() in key.lower()


def format_choices(store: ConnectionStore, filter_text: str = "") -> List[ConnectionChoice]:
    """
    Build the selection list for a store.
    
    Labels are padded to the longest matching label (never narrower than the
    table's "Label" header) so the ``(user@host)`` suffixes line up. Order
    follows the store; nothing is re-sorted.
    
    Args:
        store: Label -> record mapping
        filter_text: Substring to match labels against (empty matches all)
    
    Returns:
        Ordered list of choices
    """
    keys = [key for key in store if matches(key, filter_text or "")]
    width = max([len(key) for key in keys] + [len(LABEL_HEADER)])
    
    return [
        ConnectionChoice(
            display_label=f"{key.ljust(width)} ({store[key].target})",
            key=key,
        )
        for key in keys
    ]


def resolve_selection(choices: Sequence[ConnectionChoice], text: str) -> Optional[str]:
    """
    Key picked by submitting ``text`` against its filtered choices.
    
    An exact label wins; otherwise the first (highlighted) match is taken.
    None when nothing matches.
    """
    for choice in choices:
        if choice.key == text:
            return choice.key
    return choices[0].key if choices else None
