"""
Flask application for TranscriptKit.

Serves the transcript page and the JSON endpoint it talks to. Each request
gets its own YouTubeClient, so nothing is shared between requests.
"""

import logging
from typing import Callable, Optional

from flask import Flask, jsonify, render_template, request

from ..config import Config
from ..exceptions import InvalidVideoURL, NoTranscriptAvailable
from ..youtube import YouTubeClient, is_youtube_url

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], YouTubeClient]


def _default_client_factory() -> YouTubeClient:
    return YouTubeClient(config=Config.fetch_config())


def create_app(client_factory: Optional[ClientFactory] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        client_factory: Callable returning a fresh YouTubeClient per request
            (defaults to one configured from :class:`Config`)

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    make_client = client_factory or _default_client_factory

    @app.route('/', methods=['GET'])
    def index():
        initial_url = request.args.get('url', '').strip()
        return render_template(
            'index.html',
            initial_url=initial_url,
            autostart=bool(initial_url) and is_youtube_url(initial_url),
        )

    @app.route('/transcript', methods=['POST'])
    @app.route('/api/transcript', methods=['POST'])
    def transcript():
        body = request.get_json(silent=True)
        url = body.get('url') if isinstance(body, dict) else None
        if not url:
            return jsonify({'error': 'URL is required'}), 400
        if not isinstance(url, str):
            return jsonify({'error': 'Invalid YouTube URL'}), 400

        try:
            with make_client() as client:
                result = client.get_transcript(url)
        except InvalidVideoURL:
            return jsonify({'error': 'Invalid YouTube URL'}), 400
        except NoTranscriptAvailable as e:
            logger.info(f"No transcript for {e.video_id}: {e.reason or 'strategies exhausted'}")
            return jsonify({'error': NoTranscriptAvailable.USER_MESSAGE}), 422
        except Exception as e:
            logger.exception(f"Unexpected failure fetching transcript for {url}")
            return jsonify({'error': f'Failed to fetch transcript: {str(e)}'}), 500

        return jsonify(result.to_dict())

    return app


def main():
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app = create_app()
    app.run(host=Config.HOST, port=Config.PORT)


if __name__ == '__main__':
    main()
