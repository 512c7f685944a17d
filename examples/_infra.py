from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Nothing, Ok, Option, Result, Some

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


def parse_int(text: str) -> Option[int]:
    stripped = text.strip()
    if stripped.lstrip("-").isdigit():
        return Some(int(stripped))
    return Nothing()


def divide(dividend: int, divisor: int) -> Option[int]:
    if divisor == 0:
        return Nothing()
    return Some(dividend // divisor)


@dataclass(frozen=True, slots=True)
class FetchFailure(Exception):
    host: str
    reason: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.host}: {self.reason}"


def _no_traffic() -> dict[str, int]:
    return {}


@dataclass(slots=True)
class FakeTrafficApi:
    traffic: dict[str, int] = field(default_factory=_no_traffic)
    delay_seconds: float = 0.01

    async def fetch_traffic(self, host: str) -> Result[int, FetchFailure]:
        await asyncio.sleep(self.delay_seconds)
        visits = self.traffic.get(host)
        if visits is None:
            return Error(FetchFailure(host, "unknown host"))
        return Ok(visits)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(main())
