"""JSON log formatting for loctext.

Each record becomes one JSON object per line::

    {"timestamp": "...", "level": "INFO", "logger": "loctext.cli.sort",
     "message": "Sorted 3 line(s) into 3", "command": "sort", "locale": "sv"}

``command`` and ``locale`` appear only inside an operation context, where a
command without a locale is reported as running under "root". Values passed
with ``extra=`` are grouped under ``"extra"`` so they can never overwrite the
fields above.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries, plus those added by Formatter.format()
# and by OperationContextFilter.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "command", "locale", "op_tag"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON with operation context."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        command = getattr(record, "command", None)
        if command:
            entry["command"] = command
            entry["locale"] = getattr(record, "locale", None) or "root"

        extra = _extra_fields(record)
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Text being processed is often non-ASCII; keep it readable
        return json.dumps(entry, default=str, ensure_ascii=False)
