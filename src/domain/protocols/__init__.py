"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import ConferenceApiProtocol, LoggerProtocol
"""

from src.domain.protocols.conference_api_protocol import ConferenceApiProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ConferenceApiProtocol",
    "LoggerProtocol",
]
