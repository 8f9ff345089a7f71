from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from newsdesk.models.news import NewsItem


class SubmissionOutcome(str, enum.Enum):
    """Terminal states of an admin create/update request"""
    REDIRECT_SUCCESS = "redirect_success"
    REDISPLAY_FORM = "redisplay_form"


@dataclass
class SubmissionResult:
    outcome: SubmissionOutcome
    item: NewsItem
    form: str
    notice: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is SubmissionOutcome.REDIRECT_SUCCESS

    @property
    def errors(self):
        return self.item.errors
