"""
This package turns telemetry datagram payloads into raw player states.

- ``direction``: Server/client tagging by UDP source port.
- ``framing``: Message boundary recovery for client payloads.
- ``messages``: Protobuf schemas and tolerant decoding.
- ``outcome``: Typed per-datagram outcomes.
"""
