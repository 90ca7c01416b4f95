"""Choose a free backup name for a file about to be replaced by a link."""

import os
from datetime import datetime
from pathlib import Path

from ...constants import BACKUP_SUFFIX, BACKUP_TIMESTAMP_FORMAT


def _backup_path(target: Path, now: datetime | None = None) -> Path:
    """Return <target>.backup.<YYYYMMDD_HHMMSS>, suffixed _1, _2, ... if taken."""
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    base_name = f"{target.name}{BACKUP_SUFFIX}.{stamp}"
    candidate = target.with_name(base_name)
    counter = 1
    while os.path.lexists(candidate):
        candidate = target.with_name(f"{base_name}_{counter}")
        counter += 1
    return candidate
