# Feedback Pulse Store
# All database read/write operations

import json
import logging

from sqlalchemy import select

from .config import DIGEST_FEEDBACK_LIMIT
from .database import SessionLocal
from .helpers import utcnow
from .models import Feedback, Digest

logger = logging.getLogger(__name__)


# ===================
# READ OPERATIONS
# ===================

def get_all_feedback():
    """Get every feedback row, newest first.
    
    Returns list of feedback dicts.
    Ties on created_at fall back to insertion order (latest id first).
    """
    with SessionLocal() as session:
        rows = session.scalars(
            select(Feedback).order_by(Feedback.created_at.desc(), Feedback.id.desc())
        ).all()
        return [row.to_dict() for row in rows]


def get_recent_feedback(limit=DIGEST_FEEDBACK_LIMIT):
    """Get the most recently created feedback rows (all of them if fewer).
    
    Used by the digest generator to build its prompt.
    """
    with SessionLocal() as session:
        rows = session.scalars(
            select(Feedback)
            .order_by(Feedback.created_at.desc(), Feedback.id.desc())
            .limit(limit)
        ).all()
        return [row.to_dict() for row in rows]


def get_latest_digest():
    """Look up the most recent digest.
    
    Returns digest dict with JSON fields decoded, or None if no digest
    has been generated yet.
    """
    with SessionLocal() as session:
        row = session.scalars(
            select(Digest).order_by(Digest.created_at.desc(), Digest.id.desc()).limit(1)
        ).first()
        
        if row is None:
            return None
        
        return row.to_dict()


# ===================
# WRITE OPERATIONS
# ===================

def create_feedback(source, content, analysis, author=None, created_at=None):
    """Insert a classified feedback row.
    
    created_at is only passed when seeding backdated items; otherwise the
    row gets the current time.
    Returns the new row ID.
    """
    feedback = Feedback(
        source=source,
        content=content,
        author=author or None,
        sentiment=analysis['sentiment'],
        urgency=analysis['urgency'],
        themes=analysis['themes'],
        processed_at=utcnow()
    )
    if created_at is not None:
        feedback.created_at = created_at
    
    with SessionLocal() as session:
        session.add(feedback)
        session.commit()
        return feedback.id


def create_digest(summary, top_themes, urgent_items, sentiment_breakdown, feedback_count):
    """Insert a digest row, storing list/mapping fields as JSON text.
    
    Returns the new row ID.
    """
    digest = Digest(
        summary=summary,
        top_themes=json.dumps(top_themes),
        urgent_items=json.dumps(urgent_items),
        sentiment_breakdown=json.dumps(sentiment_breakdown),
        feedback_count=feedback_count
    )
    
    with SessionLocal() as session:
        session.add(digest)
        session.commit()
        logger.info("Stored digest %s over %s feedback items", digest.id, feedback_count)
        return digest.id
