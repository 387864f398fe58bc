from anystore.observability.logging import JsonlLogSink, LogMessage, LogSink, StdoutLogSink

__all__ = ["JsonlLogSink", "LogMessage", "LogSink", "StdoutLogSink"]
