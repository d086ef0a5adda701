"""
Domain models produced by the decoding pipeline.
"""
from zwiftcap.domain.rider import PowerUp, RiderState, normalize

__all__ = ["PowerUp", "RiderState", "normalize"]
