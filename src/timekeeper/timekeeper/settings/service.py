from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Union

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Use case: read and change the pay-period anchor date."""

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        default_anchor: Optional[date] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._settings = settings
        self._default_anchor = default_anchor
        self._clock = clock

    def get_pay_period_start(self) -> date:
        anchor = self._settings.get_pay_period_start()
        if anchor:
            return anchor
        if self._default_anchor:
            return self._default_anchor
        return self._clock().date()

    def update_pay_period_start(self, *, current_role: Role, new_start: Union[date, str]) -> date:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        if isinstance(new_start, str):
            try:
                new_start = parse_iso_date(new_start.strip())
            except ValueError:
                raise ValidationError("Invalid date (expected YYYY-MM-DD)")

        self._settings.set_pay_period_start(new_start)
        logger.info("Pay period start changed to %s", new_start)
        return new_start
