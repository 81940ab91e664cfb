"""
Fixed label sets returned or accepted by the Silver Diamond API.

Members are `str` subclasses whose values are the exact wire labels, so they
can be passed anywhere a plain label string is accepted.
"""

from enum import Enum


class Language(str, Enum):
    """ISO 639-1 codes with dedicated helpers on the client."""

    SPANISH = "es"
    ENGLISH = "en"
    GERMAN = "de"
    FRENCH = "fr"
    PORTUGUESE = "pt"
    ITALIAN = "it"
    DUTCH = "nl"
    POLISH = "pl"
    RUSSIAN = "ru"


class Sentiment(str, Enum):
    VERY_POSITIVE = "Very positive"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    VERY_NEGATIVE = "Very negative"


class Readability(str, Enum):
    VERY_EASY = "Very Easy"
    EASY = "Easy"
    FAIRLY_EASY = "Fairly Easy"
    STANDARD = "Standard"
    FAIRLY_DIFFICULT = "Fairly Difficult"
    DIFFICULT = "Difficult"
    VERY_DIFFICULT = "Very Difficult"


POSITIVE_SENTIMENTS = (Sentiment.POSITIVE, Sentiment.VERY_POSITIVE)
NEUTRAL_SENTIMENTS = (Sentiment.NEUTRAL,)
NEGATIVE_SENTIMENTS = (Sentiment.NEGATIVE, Sentiment.VERY_NEGATIVE)

READABLE = (
    Readability.VERY_EASY,
    Readability.EASY,
    Readability.FAIRLY_EASY,
    Readability.STANDARD,
)
NOT_READABLE = (
    Readability.VERY_DIFFICULT,
    Readability.DIFFICULT,
    Readability.FAIRLY_DIFFICULT,
)
