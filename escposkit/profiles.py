from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .errors import UnknownProfileError

DATA_PATH = Path(__file__).resolve().parent / "data" / "printer_profiles.json"
PROFILE_ENV_VAR = "ESCPOSKIT_PROFILE"
DEFAULT_PROFILE = "58mm"


@dataclass(frozen=True)
class PrinterProfile:
    name: str
    paper_mm: int
    max_width: int
    columns: int
    feed_lines_before_cut: int = 5


@dataclass
class PrintSettings:
    encoding: str = "utf-8"
    image_feed: int = 0
    cut_feed_lines: Optional[int] = None


class PrinterProfileRegistry:
    _cache: Dict[Path, "PrinterProfileRegistry"] = {}

    def __init__(self, profiles: Iterable[PrinterProfile]) -> None:
        self._profiles = list(profiles)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "PrinterProfileRegistry":
        key = Path(path).resolve()
        cached = cls._cache.get(key)
        if cached:
            return cached
        raw = json.loads(key.read_text(encoding="utf-8"))
        registry = cls(PrinterProfile(**item) for item in raw)
        cls._cache[key] = registry
        return registry

    @property
    def profiles(self) -> List[PrinterProfile]:
        return list(self._profiles)

    def get(self, name: str) -> Optional[PrinterProfile]:
        target = name.lower()
        for profile in self._profiles:
            if profile.name.lower() == target:
                return profile
        return None

    def require(self, name: str) -> PrinterProfile:
        profile = self.get(name)
        if not profile:
            known = ", ".join(p.name for p in self._profiles)
            raise UnknownProfileError(f"Unknown printer profile '{name}' (known: {known})")
        return profile

    def default(self) -> PrinterProfile:
        """Profile named by $ESCPOSKIT_PROFILE, else the 58 mm profile."""
        return self.require(os.environ.get(PROFILE_ENV_VAR) or DEFAULT_PROFILE)
