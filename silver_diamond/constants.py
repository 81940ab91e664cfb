"""
Shared constants for the Silver Diamond client.
"""

# API Configuration
BASE_URL = "https://api.silverdiamond.io/v1/service/"
DEFAULT_LANG = "en"

# Endpoints
LANGUAGE_DETECTION = "language-detection"
SENTIMENT_ANALYSIS = "sentiment-analysis"
SPAM_DETECTION = "spam-detection"
SHORT_TEXT_SIMILARITY = "short-text-similarity"
TEXT_RANK_KEYWORDS = "text-rank-keywords"
TEXT_RANK_SUMMARY = "text-rank-summary"
TRANSLATION = "translation"
TEXT_READABILITY = "text-readability"
IMAGE_ALT_DETECTION = "image-alt-detection"
BERT_SCORE = "bert-score"
IMAGE_OBJECT_RECOGNITION = "image-object-recognition"
NUDITY_DETECTION = "nudity-detection"

# Error envelope fields, checked in this order
ERROR_FIELDS = ("message", "error")

UNKNOWN_ERROR = "Unknown error"
