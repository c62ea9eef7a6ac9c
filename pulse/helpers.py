# Feedback Pulse Helpers
# Utility functions used across the Pulse service

import json
from datetime import datetime, timezone

_decoder = json.JSONDecoder()


def extract_json_object(text):
    """Pull the first JSON object out of free-form model output.
    
    Scans each '{' in order and returns the first one that decodes to a
    dict. Markdown fences and chatter around the object are ignored.
    
    Args:
        text: Raw model response text
    
    Returns:
        Parsed dict, or None if no JSON object could be decoded
    """
    if not text:
        return None
    
    start = text.find('{')
    while start != -1:
        try:
            parsed, _ = _decoder.raw_decode(text, start)
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass
        start = text.find('{', start + 1)
    
    return None


def utcnow():
    """Current UTC time as a naive datetime (matches stored timestamps)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_timestamp(value):
    """Format a stored timestamp for JSON output (ISO-8601 or None)"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def load_json_field(raw, default):
    """Decode a JSON text column, falling back to default when empty"""
    if not raw:
        return default
    return json.loads(raw)
