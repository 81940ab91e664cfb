"""
Clients module - HTTP integration with the Silver Diamond service

- Client: authenticated JSON transport
- decode_envelope: splits a body into error/success envelopes
"""

from .transport import (
    Client,
    Envelope,
    ErrorEnvelope,
    SuccessEnvelope,
    decode_envelope,
)

__all__ = [
    'Client',
    'Envelope',
    'ErrorEnvelope',
    'SuccessEnvelope',
    'decode_envelope',
]
