from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: int = int(os.getenv("FLAVORGRAPH_CACHE_TTL", "300"))  # 5 minutes
    max_entries: int = int(os.getenv("FLAVORGRAPH_CACHE_MAX_ENTRIES", "1024"))


DEFAULT_CACHE_CONFIG = CacheConfig()
