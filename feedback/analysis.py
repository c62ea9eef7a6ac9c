# Feedback Pulse Analysis
# Claude calls for classifying feedback and writing digests

import os
import copy
import logging
import threading

from anthropic import Anthropic
import httpx

from pulse import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    CLASSIFY_MAX_TOKENS,
    DIGEST_MAX_TOKENS,
    DIGEST_FEEDBACK_LIMIT,
    DEFAULT_ANALYSIS,
    extract_json_object,
    get_recent_feedback,
    create_digest
)
from pulse.config import VALID_SENTIMENTS, VALID_URGENCIES

logger = logging.getLogger(__name__)

# Load prompts
PROMPT_DIR = os.path.dirname(__file__)
with open(os.path.join(PROMPT_DIR, 'classify_prompt.txt'), 'r') as f:
    CLASSIFY_PROMPT = f.read()
with open(os.path.join(PROMPT_DIR, 'digest_prompt.txt'), 'r') as f:
    DIGEST_PROMPT = f.read()

FALLBACK_DIGEST = {
    'summary': 'Unable to generate summary',
    'top_themes': [],
    'urgent_items': [],
    'sentiment_breakdown': {'positive': 0, 'neutral': 0, 'negative': 0},
    'recommendations': []
}

_anthropic_client = None
_anthropic_client_lock = threading.Lock()


class NoFeedbackError(Exception):
    """Raised when a digest is requested but there is no feedback to analyse"""


def get_anthropic_client():
    """Anthropic client, created on first use"""
    global _anthropic_client
    with _anthropic_client_lock:
        if _anthropic_client is None:
            _anthropic_client = Anthropic(
                api_key=ANTHROPIC_API_KEY,
                max_retries=0,
                http_client=httpx.Client(timeout=60.0, follow_redirects=True)
            )
    return _anthropic_client


def _ask_claude(system_prompt, content, max_tokens):
    """Single Claude call, returns the raw response text"""
    response = get_anthropic_client().messages.create(
        model=ANTHROPIC_MODEL,
        max_tokens=max_tokens,
        temperature=0.2,
        system=system_prompt,
        messages=[
            {'role': 'user', 'content': content}
        ]
    )
    return response.content[0].text if response.content else ''


# ===================
# CLASSIFICATION
# ===================

def _pick(value, allowed, default):
    if isinstance(value, str) and value.strip().lower() in allowed:
        return value.strip().lower()
    return default


def _normalise_themes(themes):
    if isinstance(themes, list):
        themes = ', '.join(str(t).strip() for t in themes if str(t).strip())
    if not isinstance(themes, str) or not themes.strip():
        return DEFAULT_ANALYSIS['themes']
    return themes.strip()


def classify_feedback(content):
    """Classify a piece of feedback with Claude.
    
    Returns dict with sentiment, urgency and themes. Never raises: any
    failure (API error, no JSON, bad JSON) gives the default triple.
    """
    try:
        text = _ask_claude(CLASSIFY_PROMPT, f'Feedback: "{content}"', CLASSIFY_MAX_TOKENS)
    except Exception as e:
        logger.warning("Feedback analysis failed: %s", e)
        return dict(DEFAULT_ANALYSIS)
    
    parsed = extract_json_object(text)
    if parsed is None:
        logger.warning("Feedback analysis returned no JSON: %r", text[:200])
        return dict(DEFAULT_ANALYSIS)
    
    return {
        'sentiment': _pick(parsed.get('sentiment'), VALID_SENTIMENTS, DEFAULT_ANALYSIS['sentiment']),
        'urgency': _pick(parsed.get('urgency'), VALID_URGENCIES, DEFAULT_ANALYSIS['urgency']),
        'themes': _normalise_themes(parsed.get('themes'))
    }


# ===================
# DIGESTS
# ===================

def format_feedback_lines(rows):
    """One prompt line per feedback row, in the order given"""
    return '\n'.join(
        f"[{row['source']}] ({row['sentiment']}, {row['urgency']} urgency): {row['content']}"
        for row in rows
    )


def _count(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _normalise_digest(parsed):
    """Fill any missing digest keys from the fallback digest"""
    digest = copy.deepcopy(FALLBACK_DIGEST)
    
    if parsed.get('summary'):
        digest['summary'] = str(parsed['summary'])
    for key in ('top_themes', 'urgent_items', 'recommendations'):
        if isinstance(parsed.get(key), list):
            digest[key] = parsed[key]
    
    breakdown = parsed.get('sentiment_breakdown')
    if isinstance(breakdown, dict):
        digest['sentiment_breakdown'] = {
            key: _count(breakdown.get(key)) for key in ('positive', 'neutral', 'negative')
        }
    
    return digest


def generate_digest():
    """Generate and store a digest over the most recent feedback.
    
    Returns:
        - digest: summary, top_themes, urgent_items, sentiment_breakdown,
          recommendations (recommendations are not stored)
        - feedback_count: number of feedback rows considered
    
    Raises:
        NoFeedbackError: if there is no feedback yet
    """
    rows = get_recent_feedback(DIGEST_FEEDBACK_LIMIT)
    
    if not rows:
        raise NoFeedbackError('No feedback to analyse')
    
    digest = copy.deepcopy(FALLBACK_DIGEST)
    
    try:
        text = _ask_claude(DIGEST_PROMPT, f'FEEDBACK:\n{format_feedback_lines(rows)}', DIGEST_MAX_TOKENS)
        parsed = extract_json_object(text)
        if parsed is not None:
            digest = _normalise_digest(parsed)
        else:
            logger.warning("Digest generation returned no JSON: %r", text[:200])
    except Exception as e:
        logger.warning("Digest generation error: %s", e)
    
    create_digest(
        summary=digest['summary'],
        top_themes=digest['top_themes'],
        urgent_items=digest['urgent_items'],
        sentiment_breakdown=digest['sentiment_breakdown'],
        feedback_count=len(rows)
    )
    
    return {'digest': digest, 'feedback_count': len(rows)}
