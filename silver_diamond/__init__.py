"""
Silver Diamond Python client.

Wraps the Silver Diamond text and image analysis API:
- Language detection, sentiment and spam detection
- Similarity, TextRank keywords/summary, translation and readability
- Image description, object recognition, nudity detection and BERT score
"""

from .api import SilverDiamond
from .clients import Client
from .config import Config, configure_logging
from .enums import Language, Readability, Sentiment
from .exceptions import (
    ConfigError,
    InvalidArgument,
    RemoteError,
    SilverDiamondError,
    TransportError,
    UnexpectedResponse,
)
from .schemas import ImageDescription, NudityResult, ReadabilityResult, SpamResult

__version__ = "1.0.0"

__all__ = [
    'SilverDiamond',
    'Client',
    'Config',
    'configure_logging',
    'Language',
    'Readability',
    'Sentiment',
    'SilverDiamondError',
    'ConfigError',
    'InvalidArgument',
    'RemoteError',
    'TransportError',
    'UnexpectedResponse',
    'ImageDescription',
    'NudityResult',
    'ReadabilityResult',
    'SpamResult',
]
