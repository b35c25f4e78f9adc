import logging


class TruncatingFilter(logging.Filter):
    """Shortens long log messages, such as request URLs with query strings."""

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def _truncate(self, text: str) -> str:
        return text[: self.max_length] + "..."

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, tuple) and record.args:
            record.args = tuple(
                self._truncate(str(arg)) if len(str(arg)) > self.max_length else arg
                for arg in record.args
            )
        elif isinstance(record.msg, str) and len(record.msg) > self.max_length:
            # For f-strings or literals
            record.msg = self._truncate(record.msg)
        return True
