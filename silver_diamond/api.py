"""
Silver Diamond API facade.

One method per remote capability. Every method validates its input, builds
the request payload, sends it through the transport Client and lets the
endpoint's schema validate and project the response.

Usage:
    from silver_diamond import SilverDiamond

    sd = SilverDiamond(api_key="sd_...")
    sd.language("Hola mundo")            # 'es'
    sd.language_is_spanish("Hola mundo")  # True
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from . import schemas
from .clients import Client
from .config import Config
from .constants import DEFAULT_LANG
from .enums import (
    NEGATIVE_SENTIMENTS,
    NEUTRAL_SENTIMENTS,
    NOT_READABLE,
    POSITIVE_SENTIMENTS,
    READABLE,
    Language,
)
from .exceptions import ConfigError
from .schemas import EndpointSchema, ImageDescription, NudityResult, ReadabilityResult, SpamResult
from .utils import Labels, label_value, normalize_labels, normalize_text, optional_label

logger = logging.getLogger(__name__)


class SilverDiamond:
    """
    High level client for the Silver Diamond text and image services.

    Calls are synchronous and independent; the instance only holds the API
    key and an HTTP session, so it can be shared between threads.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        verbose: bool = False
    ):
        """
        Initialize a Silver Diamond instance.

        Args:
            api_key: API key; when None, SILVER_DIAMOND_API_KEY is used
            base_url: Service root (defaults to Config.BASE_URL)
            timeout: Request timeout in seconds; None uses the requests default
            session: Pre-built requests.Session to reuse
            verbose: If True, log API calls

        Raises:
            ConfigError: If no API key was provided
        """
        if api_key is None:
            api_key = Config.API_KEY
        if not isinstance(api_key, str) or not api_key.strip():
            logger.error("❌ No Silver Diamond API key configured")
            raise ConfigError("No API Key was provided")

        self.client = Client(
            api_key,
            base_url=base_url,
            timeout=timeout,
            session=session,
            verbose=verbose
        )

    def __repr__(self) -> str:
        return f"SilverDiamond(base_url={self.client.base_url!r})"

    def close(self):
        self.client.close()

    def __enter__(self) -> "SilverDiamond":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _call(self, schema: EndpointSchema, data: Dict[str, Any]) -> Any:
        body = self.client.request(schema.endpoint, data)
        return schema.parse(body)

    # ------------------------------------------------------------------ #
    # Language detection
    # ------------------------------------------------------------------ #

    def language(self, text: str) -> str:
        """
        Return the ISO code of the detected `text` language.

        Args:
            text: Text to analyse

        Returns:
            ISO 639-1 code, e.g. "es"
        """
        text = normalize_text(text)
        return self._call(schemas.LANGUAGE, {"text": text})

    def language_is(self, text: str, iso_codes: Labels) -> bool:
        """
        Return True if the detected language is one of `iso_codes`.

        Args:
            text: Text to analyse
            iso_codes: A code or a list of codes; comparison ignores case
        """
        iso_codes = normalize_labels(iso_codes, "ISO Codes")
        return str(self.language(text)).lower() in iso_codes

    def language_is_spanish(self, text: str) -> bool:
        return self.language_is(text, [Language.SPANISH])

    def language_is_english(self, text: str) -> bool:
        return self.language_is(text, [Language.ENGLISH])

    def language_is_german(self, text: str) -> bool:
        return self.language_is(text, [Language.GERMAN])

    def language_is_french(self, text: str) -> bool:
        return self.language_is(text, [Language.FRENCH])

    def language_is_portuguese(self, text: str) -> bool:
        return self.language_is(text, [Language.PORTUGUESE])

    def language_is_italian(self, text: str) -> bool:
        return self.language_is(text, [Language.ITALIAN])

    def language_is_dutch(self, text: str) -> bool:
        return self.language_is(text, [Language.DUTCH])

    def language_is_polish(self, text: str) -> bool:
        return self.language_is(text, [Language.POLISH])

    def language_is_russian(self, text: str) -> bool:
        return self.language_is(text, [Language.RUSSIAN])

    # ------------------------------------------------------------------ #
    # Sentiment
    # ------------------------------------------------------------------ #

    def sentiment(self, text: str) -> str:
        """Return the overall sentiment label detected in `text`."""
        text = normalize_text(text)
        return self._call(schemas.SENTIMENT, {"text": text})

    def sentiment_is(self, text: str, sentiments: Labels) -> bool:
        """
        Return True if the sentiment of `text` is one of `sentiments`.

        Args:
            text: Text to analyse
            sentiments: A label or a list of labels; comparison ignores case
        """
        sentiments = normalize_labels(sentiments, "Sentiments")
        return str(self.sentiment(text)).lower() in sentiments

    def sentiment_is_positive(self, text: str) -> bool:
        """Positive or Very positive."""
        return self.sentiment_is(text, POSITIVE_SENTIMENTS)

    def sentiment_is_neutral(self, text: str) -> bool:
        return self.sentiment_is(text, NEUTRAL_SENTIMENTS)

    def sentiment_is_negative(self, text: str) -> bool:
        """Negative or Very negative."""
        return self.sentiment_is(text, NEGATIVE_SENTIMENTS)

    # ------------------------------------------------------------------ #
    # Spam
    # ------------------------------------------------------------------ #

    def spam(self, text: str, ip: Optional[str] = None) -> SpamResult:
        """
        Run a spam detection call.

        Args:
            text: Text to classify
            ip: Optional IP address of the author

        Returns:
            SpamResult with the spam/ham flags and the 0-10 spam score
        """
        data = {"text": normalize_text(text)}
        if ip:
            data["ip"] = ip
        return self._call(schemas.SPAM, data)

    def is_spam(self, text: str, ip: Optional[str] = None) -> bool:
        return self.spam(text, ip).spam

    def is_ham(self, text: str, ip: Optional[str] = None) -> bool:
        return self.spam(text, ip).ham

    def spam_score(self, text: str, ip: Optional[str] = None) -> float:
        """Spam score between 0 and 10; higher means more likely spam."""
        return self.spam(text, ip).spam_score

    # ------------------------------------------------------------------ #
    # Text analysis
    # ------------------------------------------------------------------ #

    def similarity(self, text1: str, text2: str) -> float:
        """Similarity of two texts between 0 and 1; higher means more similar."""
        texts = [normalize_text(text1, "Text 1"), normalize_text(text2, "Text 2")]
        return self._call(schemas.SIMILARITY, {"texts": texts})

    def text_rank_keywords(self, text: str) -> List[str]:
        """Return the keywords TextRank extracts from `text`."""
        text = normalize_text(text)
        return self._call(schemas.KEYWORDS, {"text": text})

    def text_rank_summary(self, text: str) -> str:
        """Return the TextRank summary of `text`."""
        text = normalize_text(text)
        return self._call(schemas.SUMMARY, {"text": text})

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: Optional[str] = None
    ) -> str:
        """
        Translate `text` into `target_lang`.

        Args:
            text: Text to translate
            target_lang: Target language code (or Language member)
            source_lang: Source language code; detected by the service if omitted

        Returns:
            Translated text
        """
        data = {
            "text": normalize_text(text),
            "target_lang": label_value(target_lang),
        }
        source_lang = optional_label(source_lang)
        if source_lang:
            data["source_lang"] = source_lang
        return self._call(schemas.TRANSLATION, data)

    # ------------------------------------------------------------------ #
    # Readability
    # ------------------------------------------------------------------ #

    def readability(self, text: str, lang: str = DEFAULT_LANG) -> ReadabilityResult:
        """Return the readability category and score of `text` written in `lang`."""
        data = {
            "text": normalize_text(text),
            "lang": label_value(lang),
        }
        return self._call(schemas.READABILITY, data)

    def readability_category(self, text: str, lang: str = DEFAULT_LANG) -> str:
        return self.readability(text, lang).readability

    def readability_score(self, text: str, lang: str = DEFAULT_LANG) -> Any:
        return self.readability(text, lang).score

    def readability_is(
        self,
        text: str,
        lang: str = DEFAULT_LANG,
        readabilities: Labels = ()
    ) -> bool:
        """
        Return True if the readability category of `text` is in `readabilities`.

        An empty `readabilities` never matches.
        """
        readabilities = normalize_labels(readabilities, "Readabilities")
        return str(self.readability_category(text, lang)).lower() in readabilities

    def is_readable(self, text: str, lang: str = DEFAULT_LANG) -> bool:
        """Very Easy, Easy, Fairly Easy or Standard."""
        return self.readability_is(text, lang, READABLE)

    def is_not_readable(self, text: str, lang: str = DEFAULT_LANG) -> bool:
        """Fairly Difficult, Difficult or Very Difficult."""
        return self.readability_is(text, lang, NOT_READABLE)

    # ------------------------------------------------------------------ #
    # Images and URLs
    # ------------------------------------------------------------------ #

    def describe_image(self, image_url: str, lang: str = DEFAULT_LANG) -> ImageDescription:
        """Generate an alt description for `image_url` written in `lang`."""
        data = {
            "image_url": image_url,
            "lang": label_value(lang),
        }
        return self._call(schemas.IMAGE_DESCRIPTION, data)

    def bert_score(self, url: str, keyword: str) -> Any:
        """
        Return the BERT Score for a URL and keyword.

        BERT Score represents, from 0 to 100, how well the content of `url`
        answers the search intent behind `keyword`.
        """
        return self._call(schemas.BERT_SCORE, {"url": url, "keyword": keyword})

    def recognize_objects(self, image_url: str) -> List[Any]:
        """Return the objects detected inside `image_url`."""
        return self._call(schemas.OBJECTS, {"image_url": image_url})

    def nudity_detection(self, image_url: str) -> NudityResult:
        return self._call(schemas.NUDITY, {"image_url": image_url})

    def has_nudity(self, image_url: str) -> Any:
        return self.nudity_detection(image_url).has_nudity

    def nudity_probability(self, image_url: str) -> Optional[float]:
        return self.nudity_detection(image_url).probability
