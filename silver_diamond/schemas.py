"""
Response schemas for the Silver Diamond endpoints.

Each endpoint declares the fields its success body must carry and how that
body is projected into the value returned to callers. The facade never checks
response fields by hand; it looks up the schema and calls `parse`.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import constants
from .exceptions import UnexpectedResponse

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r'^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?')


def parse_float(value: Any, default: float = 0.0) -> float:
    """
    Leniently read a number the way the service historically sent scores.

    Numbers pass through; strings are read up to the first non-numeric
    character ("7.5 pts" -> 7.5). Anything else, NaN or zero yields `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        if not match:
            return default
        number = float(match.group(0))
    else:
        return default

    if math.isnan(number) or number == 0:
        return default
    return number


class SpamResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    spam: bool
    ham: bool
    spam_score: float = 0.0
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)


class ReadabilityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: Any
    readability: str
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)


class ImageDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    alt: str = Field(..., description="Generated alt text")
    confidence: Any
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)


class NudityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_nudity: Any
    probability: Optional[float] = None
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)


@dataclass(frozen=True)
class EndpointSchema:
    """
    Contract of one endpoint's success body.

    Attributes:
        endpoint: Endpoint name appended to the base URL
        required: Fields that must be present
        non_empty: Required fields that must also be truthy
        lists: Required fields that must be JSON arrays
        project: Turns the validated body into the returned value
    """
    endpoint: str
    required: Tuple[str, ...]
    project: Callable[[Dict[str, Any]], Any]
    non_empty: Tuple[str, ...] = ()
    lists: Tuple[str, ...] = ()

    def missing(self, body: Dict[str, Any]) -> List[str]:
        """Return the names of fields that break the contract."""
        invalid = [name for name in self.required if name not in body]
        invalid += [name for name in self.non_empty if name in body and not body[name]]
        invalid += [
            name for name in self.lists
            if name in body and not isinstance(body[name], list)
        ]
        return invalid

    def parse(self, body: Dict[str, Any]) -> Any:
        """
        Validate a success body and project it.

        Raises:
            UnexpectedResponse: If a required field is missing or invalid
        """
        invalid = self.missing(body)
        if invalid:
            logger.error(f"❌ {self.endpoint} response missing fields: {', '.join(invalid)}")
            raise UnexpectedResponse(endpoint=self.endpoint, missing=invalid, body=body)

        try:
            return self.project(body)
        except ValidationError as e:
            invalid = [str(error["loc"][0]) for error in e.errors() if error["loc"]]
            logger.error(f"❌ {self.endpoint} response has invalid fields: {', '.join(invalid)}")
            raise UnexpectedResponse(endpoint=self.endpoint, missing=invalid, body=body) from e


def _field(name: str) -> Callable[[Dict[str, Any]], Any]:
    return lambda body: body[name]


def _spam(body: Dict[str, Any]) -> SpamResult:
    return SpamResult(
        spam=bool(body["spam"]),
        ham=bool(body["ham"]),
        spam_score=parse_float(body.get("spamScore")),
        raw=body
    )


def _readability(body: Dict[str, Any]) -> ReadabilityResult:
    return ReadabilityResult(score=body["score"], readability=body["readability"], raw=body)


def _image_description(body: Dict[str, Any]) -> ImageDescription:
    return ImageDescription(alt=body["alt"], confidence=body["confidence"], raw=body)


def _nudity(body: Dict[str, Any]) -> NudityResult:
    return NudityResult(
        has_nudity=body["has_nudity"],
        probability=body.get("probability"),
        raw=body
    )


LANGUAGE = EndpointSchema(
    constants.LANGUAGE_DETECTION, ("language",), _field("language"),
    non_empty=("language",)
)
SENTIMENT = EndpointSchema(
    constants.SENTIMENT_ANALYSIS, ("sentiment",), _field("sentiment"),
    non_empty=("sentiment",)
)
SPAM = EndpointSchema(constants.SPAM_DETECTION, ("spam", "ham"), _spam)
SIMILARITY = EndpointSchema(
    constants.SHORT_TEXT_SIMILARITY, ("similarity",), _field("similarity")
)
KEYWORDS = EndpointSchema(
    constants.TEXT_RANK_KEYWORDS, ("keywords",), _field("keywords"),
    lists=("keywords",)
)
SUMMARY = EndpointSchema(constants.TEXT_RANK_SUMMARY, ("summary",), _field("summary"))
TRANSLATION = EndpointSchema(
    constants.TRANSLATION, ("translation",), _field("translation"),
    non_empty=("translation",)
)
READABILITY = EndpointSchema(
    constants.TEXT_READABILITY, ("score", "readability"), _readability
)
IMAGE_DESCRIPTION = EndpointSchema(
    constants.IMAGE_ALT_DETECTION, ("alt", "confidence"), _image_description
)
BERT_SCORE = EndpointSchema(constants.BERT_SCORE, ("bert_score",), _field("bert_score"))
OBJECTS = EndpointSchema(
    constants.IMAGE_OBJECT_RECOGNITION, ("objects",), _field("objects")
)
NUDITY = EndpointSchema(constants.NUDITY_DETECTION, ("has_nudity",), _nudity)
