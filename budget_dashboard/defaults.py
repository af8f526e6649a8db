"""Loader for the seed commitments and savings goals."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

try:
    from .config import get_defaults_path
except ImportError:
    from config import get_defaults_path

# Fields accepted from each seed record
COMMITMENT_FIELDS = ('id', 'name', 'amount', 'paid')
SAVINGS_FIELDS = ('id', 'name', 'amount')


def load_defaults(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the seed records from a JSON file.

    Args:
        path: File to read. Defaults to the configured defaults file.

    Returns:
        Dictionary with ``commitments`` and ``savings`` lists

    Raises:
        FileNotFoundError: If the defaults file doesn't exist
        json.JSONDecodeError: If the defaults file is invalid JSON

    Example:
        >>> defaults = load_defaults()
        >>> defaults['savings'][0]['name']
        'ASB'
    """
    target = Path(path) if path is not None else get_defaults_path()

    if not target.exists():
        raise FileNotFoundError(f"Defaults file not found: {target}")

    with open(target, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        data = {}
    return {
        'commitments': _clean_records(data.get('commitments'), COMMITMENT_FIELDS),
        'savings': _clean_records(data.get('savings'), SAVINGS_FIELDS),
    }


def _clean_records(records: Any, fields: Tuple[str, ...]) -> List[Dict[str, Any]]:
    """Keep mappings with an integer ``id`` and a string ``name``, limited to ``fields``."""
    if not isinstance(records, list):
        return []
    cleaned = []
    for record in records:
        if not isinstance(record, dict):
            continue
        record_id, name = record.get('id'), record.get('name')
        if not isinstance(record_id, int) or isinstance(record_id, bool) or not isinstance(name, str):
            continue
        entry = {k: v for k, v in record.items() if k in fields}
        if 'paid' in entry:
            entry['paid'] = bool(entry['paid'])
        cleaned.append(entry)
    return cleaned
