from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Iterator, Optional

from workcal.calendar._exceptions import CalendarError
from workcal.calendar.config import CalendarConfig

logger = logging.getLogger(__name__)


class CalendarRegistry:
    """
    Named calendars with one active entry.

    Updates are last-writer-wins: every change swaps in a new immutable
    CalendarConfig, so a config handed to an operation never changes under it.
    """

    def __init__(
        self,
        configs: Optional[Iterable[CalendarConfig]] = None,
        active: Optional[str] = None,
    ) -> None:
        self._configs: dict[str, CalendarConfig] = {}
        for config in configs if configs is not None else (CalendarConfig(),):
            self._configs[config.name] = config
        if not self._configs:
            raise CalendarError("A registry needs at least one calendar.")
        self._active: str = active if active is not None else next(iter(self._configs))
        if self._active not in self._configs:
            raise CalendarError(f"Unknown calendar {self._active!r}.")

    # ── mutation ─────────────────────────────────────────────────────────

    def register(
        self, name: str, config: Optional[CalendarConfig] = None, /, **settings: Any
    ) -> CalendarConfig:
        """Add or replace calendar ``name``, built from ``config`` and/or ``settings``."""
        if "name" in settings:
            raise CalendarError("The calendar name is given positionally, not as a setting.")
        base = replace(config, name=name) if config is not None else CalendarConfig(name=name)
        new = base.merge(**settings) if settings else base
        self._configs[name] = new
        logger.debug(f"Registered calendar {name!r}: {new}")
        return new

    def update(self, name: str, /, **settings: Any) -> CalendarConfig:
        """Merge ``settings`` into calendar ``name``; unset fields are kept."""
        if "name" in settings:
            raise CalendarError("A calendar cannot be renamed through update().")
        current = self._configs.get(name) or CalendarConfig(name=name)
        new = current.merge(**settings)
        self._configs[name] = new
        logger.debug(f"Updated calendar {name!r} with {sorted(settings)}")
        return new

    def use(self, name: str) -> CalendarConfig:
        """Make ``name`` the active calendar."""
        if name not in self._configs:
            raise CalendarError(f"Unknown calendar {name!r}.")
        self._active = name
        return self._configs[name]

    # ── lookup ───────────────────────────────────────────────────────────

    def get(self, name: Optional[str] = None) -> CalendarConfig:
        key = self._active if name is None else name
        try:
            return self._configs[key]
        except KeyError:
            raise CalendarError(f"Unknown calendar {key!r}.") from None

    @property
    def active(self) -> CalendarConfig:
        return self._configs[self._active]

    @property
    def active_name(self) -> str:
        return self._active

    @property
    def names(self) -> list[str]:
        return list(self._configs)

    def __contains__(self, name: object) -> bool:
        return name in self._configs

    def __iter__(self) -> Iterator[CalendarConfig]:
        return iter(self._configs.values())

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"CalendarRegistry(calendars={self.names}, active={self._active!r})"
