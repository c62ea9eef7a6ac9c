# Feedback Pulse Slack Formatting
# Turns the latest digest into a Slack Block Kit message

NO_DIGEST_TEXT = 'No digest available yet. Visit the dashboard to generate one.'


def _bullets(items, empty_text):
    """Render a list as Slack bullet lines, or empty_text if there are none"""
    return '\n'.join(f'• {item}' for item in items) or empty_text


def format_slack_digest(digest):
    """Build a Slack payload for a digest.
    
    Args:
        digest: Digest dict (JSON fields decoded) or None
    
    Returns:
        Dict ready to post to a Slack incoming webhook
    """
    if not digest:
        return {'text': NO_DIGEST_TEXT}
    
    sentiment = digest.get('sentiment_breakdown') or {}
    top_themes = digest.get('top_themes') or []
    urgent_items = digest.get('urgent_items') or []
    
    sentiment_line = (
        f"✅ Positive: {sentiment.get('positive', 0) or 0} | "
        f"😐 Neutral: {sentiment.get('neutral', 0) or 0} | "
        f"❌ Negative: {sentiment.get('negative', 0) or 0}"
    )
    
    return {
        'blocks': [
            {
                'type': 'header',
                'text': {'type': 'plain_text', 'text': '📊 Daily Feedback Pulse', 'emoji': True}
            },
            {
                'type': 'section',
                'text': {'type': 'mrkdwn', 'text': f"*Summary*\n{digest.get('summary', '')}"}
            },
            {
                'type': 'section',
                'text': {'type': 'mrkdwn', 'text': f'*Sentiment*\n{sentiment_line}'}
            },
            {
                'type': 'section',
                'text': {'type': 'mrkdwn', 'text': f"*Top Themes*\n{_bullets(top_themes, 'None identified')}"}
            },
            {
                'type': 'section',
                'text': {'type': 'mrkdwn', 'text': f"*🚨 Urgent Items*\n{_bullets(urgent_items, 'None')}"}
            },
            {
                'type': 'context',
                'elements': [{
                    'type': 'mrkdwn',
                    'text': f"Based on {digest.get('feedback_count')} feedback items | Generated {digest.get('created_at')}"
                }]
            }
        ]
    }
