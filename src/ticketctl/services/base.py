"""BaseService — abstract foundation for all ticketctl services.

Every service receives the unified settings at construction time, plus an
optional clock that supplies the default reference date.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

from ticketctl.services._helpers import today

if TYPE_CHECKING:
    from ticketctl.config.settings import TicketSettings


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CheckoutService(BaseService):
            def checkout(self, customer: str, ...) -> ServiceResult:
                reference = self._reference_date(reference_date)
                ...
    """

    def __init__(
        self,
        settings: TicketSettings,
        *,
        clock: Callable[[], date] = today,
    ) -> None:
        self._settings = settings
        self._clock = clock

    def _reference_date(self, reference_date: date | None) -> date:
        """Resolve an explicit reference date, falling back to the clock."""
        return reference_date if reference_date is not None else self._clock()
