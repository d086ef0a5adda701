from zwiftcap.capture import CaptureOpenError, LiveCapture, OfflineCapture, ZwiftCapture
from zwiftcap.config import CaptureSettings
from zwiftcap.domain import PowerUp, RiderState
from zwiftcap.parsing.direction import Direction, TaggedMessage, classify
from zwiftcap.parsing.framing import locate_frame
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CaptureOpenError",
    "LiveCapture",
    "OfflineCapture",
    "ZwiftCapture",
    "CaptureSettings",
    "PowerUp",
    "RiderState",
    "Direction",
    "TaggedMessage",
    "classify",
    "locate_frame",
]

try:
    __version__ = version("zwiftcap")
except PackageNotFoundError:
    __version__ = "0.0.0"
