from .structured import StructuredLogSink, REQUEST_LOG_MESSAGE

__all__ = ["StructuredLogSink", "REQUEST_LOG_MESSAGE"]
