from __future__ import annotations

import os


EXACTRREF_LOG_LEVEL = os.environ.get("EXACTRREF_LOG_LEVEL", "WARNING").upper()
