#!/usr/bin/env python3
"""
Live API checks against the real Silver Diamond service.

Skipped unless SILVER_DIAMOND_API_KEY is set.
"""

import os

import pytest

pytestmark = pytest.mark.skipif(
    not os.getenv("SILVER_DIAMOND_API_KEY"),
    reason="SILVER_DIAMOND_API_KEY not set"
)


@pytest.fixture
def live():
    from silver_diamond import SilverDiamond

    with SilverDiamond(os.getenv("SILVER_DIAMOND_API_KEY")) as sd:
        yield sd


class TestLiveText:
    """Smoke tests for the text endpoints"""

    def test_language(self, live):
        assert live.language_is_spanish("Hola mundo, ¿cómo estás?")

    def test_sentiment(self, live):
        assert isinstance(live.sentiment("I really love this!"), str)

    def test_similarity_range(self, live):
        score = live.similarity("The cat sat on the mat", "A cat was sitting on a mat")
        assert 0 <= score <= 1

    def test_keywords(self, live):
        keywords = live.text_rank_keywords(
            "Python is a programming language. Python is used for automation."
        )
        assert isinstance(keywords, list)


class TestLiveErrors:
    """The service rejects bad credentials with a message body"""

    def test_bad_key(self):
        from silver_diamond import RemoteError, SilverDiamond

        with pytest.raises(RemoteError):
            SilverDiamond("invalid-key").language("Hola mundo")
