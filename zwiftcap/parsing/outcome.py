from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from zwiftcap.domain.rider import RiderState
    from zwiftcap.parsing.direction import Direction
    from zwiftcap.parsing.framing import FrameWindow


class Outcome(str, Enum):
    RECORDS = "records"
    NO_TRANSPORT = "no_transport"
    FRAMING_MISS = "framing_miss"
    DECODE_FAILURE = "decode_failure"


@dataclass
class DatagramResult:
    """What one captured frame turned into."""
    outcome: Outcome
    riders: list["RiderState"] = field(default_factory=list)
    direction: Optional["Direction"] = None
    window: Optional["FrameWindow"] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.RECORDS
