import logging

from flask import Flask, jsonify, request

from recitation import compare_texts
from recitation.config import API_HOST, API_PORT, DEFAULT_LANGUAGE, MAX_TEXT_CHARS
from recitation.scorer.feedback import accuracy_band, summary_lines
from recitation.scorer.statistics import word_error_rate_from

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ============================================================================
# UTILITY
# ============================================================================
def validate_payload(data):
    """Return (reference, recognized, language, error_message)."""
    if not isinstance(data, dict):
        return None, None, None, "Expected a JSON object"

    reference = data.get('reference')
    recognized = data.get('recognized', '')
    language = data.get('language', DEFAULT_LANGUAGE)

    if not isinstance(reference, str):
        return None, None, None, "No reference text provided"
    if recognized is None:
        recognized = ''
    if not isinstance(recognized, str):
        return None, None, None, "Recognized text must be a string"
    if language is not None and not isinstance(language, str):
        return None, None, None, "Language must be a string"
    return reference, recognized, language, None


# ============================================================================
# ROUTES
# ============================================================================
@app.route('/api/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"})


@app.route('/api/compare', methods=['POST'])
def compare():
    """Compare a reference text with recognized text and return the scored alignment."""
    data = request.get_json(silent=True)
    reference, recognized, language, error = validate_payload(data)
    if error:
        return jsonify({"error": error}), 400

    if len(reference) > MAX_TEXT_CHARS or len(recognized) > MAX_TEXT_CHARS:
        return jsonify({"error": f"Texts are limited to {MAX_TEXT_CHARS} characters"}), 413

    try:
        result = compare_texts(reference, recognized, language)
        response = result.to_dict()
        response['band'] = accuracy_band(result.accuracy)
        response['wer'] = word_error_rate_from(result.aligned_tokens)
        response['summary'] = summary_lines(result)
        return jsonify(response)
    except Exception as e:
        logger.exception("Comparison failed")
        return jsonify({"error": str(e)}), 500


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=True, host=API_HOST, port=API_PORT)
