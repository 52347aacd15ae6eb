"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_VISIBLE_COUNT = 10


def _available_cpus() -> int | None:
    """CPUs this process may run on, honouring affinity masks."""
    if hasattr(os, "process_cpu_count"):
        return os.process_cpu_count()
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0))
    return os.cpu_count()


def _get_default_workers() -> int:
    """Number of usable hardware execution units, never less than one."""
    return _available_cpus() or 1


@dataclass(slots=True)
class AppConfig:
    root: Path = Path(".")
    workers: int | None = None
    visible_count: int = DEFAULT_VISIBLE_COUNT
    exact_merge: bool = False

    def __post_init__(self) -> None:
        if self.visible_count < 0:
            raise ValueError("visible_count must be non-negative")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")

    def resolve_workers(self) -> int:
        if self.workers is None:
            return _get_default_workers()
        return self.workers

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if Path(self.root).is_absolute() or base_dir is None:
            return Path(self.root)
        return base_dir / self.root
