from .core import RecordedCall, RecordingRepository

__all__ = ["RecordedCall", "RecordingRepository"]
