# Feedback Pulse Shared Module
# Common functions used by the Pulse service

from .config import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    CLASSIFY_MAX_TOKENS,
    DIGEST_MAX_TOKENS,
    DIGEST_FEEDBACK_LIMIT,
    DEFAULT_ANALYSIS,
    LOG_LEVEL
)

from .helpers import (
    extract_json_object,
    utcnow
)

from .database import init_db

from .store import (
    get_all_feedback,
    get_recent_feedback,
    get_latest_digest,
    create_feedback,
    create_digest
)

from .slack import format_slack_digest

from .seed import get_seed_feedback
