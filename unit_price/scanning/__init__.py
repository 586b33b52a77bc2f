from .frame_scanner import FrameOutcome, FrameScanner

__all__ = ["FrameOutcome", "FrameScanner"]
