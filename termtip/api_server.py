#!/usr/bin/env python3
"""
TermTip REST API Server
Provides HTTP endpoints so a web frontend can render glossary tooltips
"""

import logging
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from termtip.core.config import TermTipConfig, default_config
from termtip.core.glossary import Glossary, get_default_glossary
from termtip.core.matcher import TermSegment

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for the web frontend

# Global components (initialized once)
glossary: Optional[Glossary] = None
config: TermTipConfig = default_config
initialized = False


def initialize_components(custom_glossary: Optional[Glossary] = None,
                          custom_config: Optional[TermTipConfig] = None) -> bool:
    """Initialize TermTip components"""
    global glossary, config, initialized

    config = custom_config or default_config
    initialized = True

    try:
        if custom_glossary is not None:
            glossary = custom_glossary
        elif custom_config is not None:
            glossary = Glossary.from_config(config)
        else:
            glossary = get_default_glossary()
    except Exception:
        logger.exception("Failed to initialize TermTip glossary")
        glossary = None
        return False

    logger.info(f"TermTip API ready with {len(glossary.dictionary)} terms")
    return True


def _get_glossary() -> Optional[Glossary]:
    # A failed load is not retried per request
    if not initialized:
        initialize_components()
    return glossary


def _unavailable():
    return jsonify({"error": "Glossary not available"}), 503


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({"status": "healthy", "message": "TermTip API is running"})


@app.route('/api/segment', methods=['POST'])
def segment_text():
    """Split text into plain and glossary term segments"""
    data = request.get_json(silent=True) or {}
    text = data.get('text')

    if not isinstance(text, str):
        return jsonify({"error": "Field 'text' must be a string"}), 400

    if len(text) > config.api.max_text_chars:
        return jsonify({
            "error": f"Text exceeds {config.api.max_text_chars} characters ({len(text)})"
        }), 413

    current = _get_glossary()
    if current is None:
        return _unavailable()

    try:
        segments = current.segment(text)
    except Exception as e:
        logger.exception("Segmentation failed")
        return jsonify({"error": str(e)}), 500

    return jsonify({
        "segments": [segment.to_dict() for segment in segments],
        "terms": sum(1 for segment in segments if isinstance(segment, TermSegment))
    })


@app.route('/api/terms/<path:term>', methods=['GET'])
def get_term(term):
    """Look up a single glossary term"""
    current = _get_glossary()
    if current is None:
        return _unavailable()

    definition = current.get_definition(term)
    if definition is None:
        return jsonify({"error": f"Term not found: {term}"}), 404

    return jsonify({"term": term, "definition": definition})


@app.route('/api/search', methods=['GET'])
def search_terms():
    """Search glossary terms and definitions"""
    query = request.args.get('q', '').strip()
    if not query:
        return jsonify({"error": "Query parameter 'q' is required"}), 400

    limit = request.args.get('limit', default=20, type=int)
    if limit < 0:
        return jsonify({"error": "Query parameter 'limit' must not be negative"}), 400

    current = _get_glossary()
    if current is None:
        return _unavailable()

    results = current.search_terms(query)[:limit]

    return jsonify({
        "query": query,
        "results": [{"term": term, "definition": definition} for term, definition in results]
    })


@app.route('/api/stats', methods=['GET'])
def get_stats():
    """Glossary statistics"""
    current = _get_glossary()
    if current is None:
        return _unavailable()

    return jsonify(current.get_stats())


def main():
    logging.basicConfig(level=getattr(logging, default_config.log_level, logging.INFO),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not initialize_components():
        raise SystemExit(1)

    app.run(host=config.api.host, port=config.api.port, debug=config.api.debug or config.debug)


if __name__ == '__main__':
    main()
