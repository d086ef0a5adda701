from zwiftcap.parsing.messages.decode import (
    DecodeResult,
    decode_client_message,
    decode_server_message,
    decode_tagged,
)
from zwiftcap.parsing.messages.schema import ClientToServer, PlayerState, ServerToClient

__all__ = [
    "DecodeResult",
    "decode_client_message",
    "decode_server_message",
    "decode_tagged",
    "ClientToServer",
    "PlayerState",
    "ServerToClient",
]
