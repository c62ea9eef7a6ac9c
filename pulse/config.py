# Feedback Pulse Config
# Central configuration for the Pulse service

import os

# Anthropic
ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
ANTHROPIC_MODEL = os.environ.get('ANTHROPIC_MODEL', 'claude-sonnet-4-20250514')

# Token budgets per model call
CLASSIFY_MAX_TOKENS = 150
DIGEST_MAX_TOKENS = 800

# Database
DATABASE_URL = os.environ.get('DATABASE_URL', 'sqlite:///feedback_pulse.db')

# Logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

# Digest window (most recent rows only)
DIGEST_FEEDBACK_LIMIT = 50

# Classification values
VALID_SENTIMENTS = ['positive', 'neutral', 'negative']
VALID_URGENCIES = ['high', 'medium', 'low']

DEFAULT_ANALYSIS = {
    'sentiment': 'neutral',
    'urgency': 'medium',
    'themes': 'general'
}
