"""
Logging helpers with safe console output for narrow (e.g. latin-1) encodings
"""
import logging

from config import AppConfig


class SafeStreamHandler(logging.StreamHandler):
    """
    Stream handler that falls back to ASCII when the console encoding
    can't represent a message (card names may carry symbols such as suits).
    """

    def emit(self, record):
        try:
            msg = self.format(record)
            try:
                self.stream.write(msg + self.terminator)
            except UnicodeEncodeError:
                safe_msg = msg.encode('ascii', errors='replace').decode('ascii')
                self.stream.write(safe_msg + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def configure_logging(level=None):
    """Install the safe handler on the root logger (idempotent)"""
    root = logging.getLogger()
    if any(isinstance(h, SafeStreamHandler) for h in root.handlers):
        return
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    root.addHandler(handler)
    root.setLevel(level or AppConfig.LOG_LEVEL)
