# Feedback Pulse Seed Data
# Bundled example feedback for demos and local testing

from datetime import timedelta

from .helpers import utcnow

# (source, author, content, hours ago)
SEED_FEEDBACK = [
    ('discord', 'dev_sarah',
     'The Workers deployment is super slow today. Took almost 2 minutes to deploy a simple change. Anyone else experiencing this?',
     1),
    ('github', 'clouduser42',
     'Bug: wrangler dev crashes when using D1 bindings locally. Error: "Cannot read property of undefined". Steps to reproduce attached.',
     2),
    ('support_ticket', 'enterprise_client',
     'URGENT: Our production Workers are returning 503 errors intermittently. This is affecting our checkout flow. Please escalate immediately.',
     0.5),
    ('twitter', '@happy_developer',
     'Just deployed my first @Cloudflare Worker and wow, the DX is incredible! From zero to production in 10 minutes. 🚀',
     1.5),
    ('discord', 'ml_engineer',
     'Is there any way to increase the CPU time limit for Workers? 50ms is not enough for my AI inference workload.',
     2.5),
    ('github', 'realtime_dev',
     'Feature request: Please add native support for WebSockets in Durable Objects without the need for workarounds.',
     3),
    ('support_ticket', 'startup_founder',
     "Billing question: We were charged for requests that returned errors. Shouldn't failed requests be excluded from billing?",
     4),
    ('twitter', '@frustrated_coder',
     'The Cloudflare docs are confusing. Spent 3 hours trying to figure out how to set up KV bindings. Need better examples.',
     5),
    ('discord', 'ai_enthusiast',
     'Love the new Workers AI! The Llama integration is seamless. Built a chatbot in under an hour.',
     6),
    ('github', 'docs_contributor',
     'Documentation bug: The D1 SQL syntax examples show deprecated commands. Please update to current API.',
     7),
    ('support_ticket', 'migration_team',
     'How do I migrate from AWS Lambda to Cloudflare Workers? Looking for a migration guide or best practices document.',
     8),
    ('twitter', '@cost_saver',
     'Cloudflare Workers pricing is unbeatable. Moved our entire API and saving 70% compared to AWS. Highly recommend!',
     9),
]


def get_seed_feedback():
    """Seed items with created_at backdated from now.
    
    Returns list of dicts with source, author, content, created_at.
    """
    now = utcnow()
    return [
        {
            'source': source,
            'author': author,
            'content': content,
            'created_at': now - timedelta(hours=hours_ago)
        }
        for source, author, content, hours_ago in SEED_FEEDBACK
    ]
