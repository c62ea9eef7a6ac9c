# Feedback Pulse
# Feedback collection and AI daily digests
#
# Accepts feedback from any channel (Discord, GitHub, support tickets...),
# classifies each item with Claude, and rolls the most recent items up
# into a digest for the dashboard or Slack.

import sys
import os
import logging

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify, render_template
from werkzeug.exceptions import HTTPException

from pulse import (
    LOG_LEVEL,
    init_db,
    get_all_feedback,
    get_latest_digest,
    create_feedback,
    format_slack_digest,
    get_seed_feedback
)
from feedback.analysis import classify_feedback, generate_digest, NoFeedbackError

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}


@app.before_request
def handle_preflight():
    """Answer CORS preflight for any path with an empty body"""
    if request.method == 'OPTIONS':
        return '', 200


@app.after_request
def add_cors_headers(response):
    response.headers.update(CORS_HEADERS)
    return response


@app.errorhandler(Exception)
def handle_error(e):
    """Failure boundary for every route"""
    if isinstance(e, HTTPException):
        # Unknown path, or known path with the wrong method
        if e.code in (404, 405):
            return jsonify({'error': 'Not Found'}), 404
        return jsonify({'error': e.description}), e.code
    
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({
        'error': 'Internal Server Error',
        'details': str(e)
    }), 500


@app.route('/', methods=['GET'])
def home():
    """Dashboard page"""
    return render_template('index.html')


@app.route('/api/init', methods=['POST'])
def init():
    """Create the feedback and digests tables (safe to repeat)"""
    try:
        init_db()
        return jsonify({'success': True, 'message': 'Database initialized'})
    except Exception as e:
        logger.error("Database init failed: %s", e)
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/seed', methods=['POST'])
def seed():
    """Classify and insert the bundled example feedback.
    
    Items go in one at a time; a failure partway through keeps the rows
    already inserted.
    """
    seeded_count = 0
    
    for item in get_seed_feedback():
        analysis = classify_feedback(item['content'])
        create_feedback(
            source=item['source'],
            content=item['content'],
            author=item['author'],
            analysis=analysis,
            created_at=item['created_at']
        )
        seeded_count += 1
    
    logger.info("Seeded %s feedback items", seeded_count)
    return jsonify({
        'success': True,
        'message': f'Seeded {seeded_count} feedback items with AI analysis'
    })


@app.route('/api/feedback', methods=['POST'])
def add_feedback():
    """Submit a piece of feedback.
    
    Accepts:
        - source: Channel the feedback came from (required)
        - content: The feedback text (required)
        - author: Who wrote it (optional)
    
    Returns:
        - success: True
        - id: New feedback row ID
        - analysis: sentiment, urgency, themes
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    
    source = data.get('source')
    content = data.get('content')
    author = data.get('author')
    
    if not source or not content:
        return jsonify({'error': 'source and content are required'}), 400
    
    if not all(isinstance(value, str) for value in (source, content, author or '')):
        return jsonify({'error': 'source, content and author must be strings'}), 400
    
    analysis = classify_feedback(content)
    
    feedback_id = create_feedback(
        source=source,
        content=content,
        author=author,
        analysis=analysis
    )
    
    return jsonify({
        'success': True,
        'id': feedback_id,
        'analysis': analysis
    })


@app.route('/api/feedback', methods=['GET'])
def list_feedback():
    """All feedback, newest first"""
    return jsonify(get_all_feedback())


@app.route('/api/digest/generate', methods=['POST'])
def digest_generate():
    """Generate a new digest from the most recent 50 feedback items"""
    try:
        result = generate_digest()
    except NoFeedbackError as e:
        return jsonify({'error': str(e)}), 400
    
    return jsonify({
        'success': True,
        'digest': result['digest'],
        'feedback_count': result['feedback_count']
    })


@app.route('/api/digest', methods=['GET'])
def latest_digest():
    """Most recent digest"""
    digest = get_latest_digest()
    
    if not digest:
        return jsonify({'error': 'No digest available. Generate one first.'}), 404
    
    return jsonify(digest)


@app.route('/webhook/slack', methods=['GET'])
def slack_webhook():
    """Latest digest as a Slack Block Kit payload"""
    return jsonify(format_slack_digest(get_latest_digest()))


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Feedback Pulse',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
