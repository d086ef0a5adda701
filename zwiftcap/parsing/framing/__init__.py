"""
Recovery of the protobuf message boundaries inside client-originated
payloads, expressed as an ordered chain of framing strategies.
"""
from zwiftcap.parsing.framing.locate import (
    DEFAULT_STRATEGIES,
    MESSAGE_TAG_PREFIX,
    TRAILER_LENGTH,
    FrameWindow,
    FramingStrategy,
    HeaderOffsetStrategy,
    TagScanStrategy,
    ZeroOffsetStrategy,
    locate_frame,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "MESSAGE_TAG_PREFIX",
    "TRAILER_LENGTH",
    "FrameWindow",
    "FramingStrategy",
    "HeaderOffsetStrategy",
    "TagScanStrategy",
    "ZeroOffsetStrategy",
    "locate_frame",
]
