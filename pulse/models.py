"""
Database models for Feedback Pulse
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, func

from .database import Base
from .helpers import format_timestamp, load_json_field, utcnow


class Feedback(Base):
    """Feedback item - one piece of raw input plus its classification"""
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    source = Column(String(100), nullable=False)  # e.g. "discord", "github", "support_ticket"
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=True)
    sentiment = Column(String(20), nullable=True)
    urgency = Column(String(20), nullable=True)
    themes = Column(Text, nullable=True)  # comma-separated, e.g. "performance, bug"
    created_at = Column(DateTime, default=utcnow, server_default=func.now())
    processed_at = Column(DateTime, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'source': self.source,
            'content': self.content,
            'author': self.author,
            'sentiment': self.sentiment,
            'urgency': self.urgency,
            'themes': self.themes,
            'created_at': format_timestamp(self.created_at),
            'processed_at': format_timestamp(self.processed_at)
        }

    def __repr__(self):
        return f"<Feedback(id={self.id}, source='{self.source}', sentiment='{self.sentiment}')>"


class Digest(Base):
    """Digest - summary generated over the most recent feedback.
    
    List and mapping fields are kept as JSON text.
    """
    __tablename__ = "digests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    summary = Column(Text, nullable=False)
    top_themes = Column(Text, nullable=True)
    urgent_items = Column(Text, nullable=True)
    sentiment_breakdown = Column(Text, nullable=True)
    feedback_count = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=utcnow, server_default=func.now())

    def to_dict(self):
        """Row as a dict with the JSON text fields decoded"""
        return {
            'id': self.id,
            'summary': self.summary,
            'top_themes': load_json_field(self.top_themes, []),
            'urgent_items': load_json_field(self.urgent_items, []),
            'sentiment_breakdown': load_json_field(self.sentiment_breakdown, {}),
            'feedback_count': self.feedback_count,
            'created_at': format_timestamp(self.created_at)
        }

    def __repr__(self):
        return f"<Digest(id={self.id}, feedback_count={self.feedback_count})>"
