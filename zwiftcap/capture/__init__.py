"""
Capture sources and the pull-based pipeline that runs captured frames
through the decoder.
"""
from zwiftcap.capture.base import CaptureOpenError, CaptureSource
from zwiftcap.capture.decapsulate import UdpDatagram, decapsulate
from zwiftcap.capture.iterator import ZwiftCapture, process_frame
from zwiftcap.capture.live import LiveCapture
from zwiftcap.capture.offline import OfflineCapture

__all__ = [
    "CaptureOpenError",
    "CaptureSource",
    "UdpDatagram",
    "decapsulate",
    "ZwiftCapture",
    "process_frame",
    "LiveCapture",
    "OfflineCapture",
]
