"""
Project status classification.

The backend status vocabulary is inconsistent across records ("ACTIVE",
"ongoing", "In Progress", missing). Everything that needs a status bucket
goes through StatusClassifier so the calendar and the project filters agree.
"""

import math
from typing import Optional

from ..config.defaults import StatusParams
from ..data.models import ProjectRecord, StatusClass


def normalize_status(status: Optional[str]) -> str:
    """Lower-case, trim and fold spaces/hyphens to underscores."""
    if not status:
        return ""
    return "_".join(status.strip().lower().replace("-", " ").split())


class StatusClassifier:
    """Maps raw status strings plus amount hints onto StatusClass."""

    def __init__(self, params: Optional[StatusParams] = None):
        self.params = params or StatusParams()

        # Checked in order: completed wins over active, active over pending
        self._vocabulary = (
            (StatusClass.COMPLETED, frozenset(normalize_status(s) for s in self.params.completed)),
            (StatusClass.ACTIVE, frozenset(normalize_status(s) for s in self.params.active)),
            (StatusClass.PENDING, frozenset(normalize_status(s) for s in self.params.pending)),
        )

    def classify(self, status: Optional[str], pending_amount: Optional[float] = None) -> StatusClass:
        """
        Classify a status string.

        Args:
            status: Raw status text, may be None
            pending_amount: Outstanding amount, used only when the status is
                absent or unrecognized

        Returns:
            The status class; UNKNOWN when neither the text nor the hint decide
        """
        key = normalize_status(status) if isinstance(status, str) else ""

        if key:
            for status_class, synonyms in self._vocabulary:
                if key in synonyms:
                    return status_class

        if pending_amount is None or isinstance(pending_amount, bool):
            return StatusClass.UNKNOWN
        if not isinstance(pending_amount, (int, float)) or math.isnan(pending_amount):
            return StatusClass.UNKNOWN

        return StatusClass.ACTIVE if pending_amount > 0 else StatusClass.COMPLETED

    def classify_project(self, project: ProjectRecord) -> StatusClass:
        """Classify a project record using its status and pending amount."""
        return self.classify(project.status, pending_amount=project.pending_amount)


_default_classifier = StatusClassifier()


def classify_status(status: Optional[str], pending_amount: Optional[float] = None) -> StatusClass:
    """Classify with the default vocabulary."""
    return _default_classifier.classify(status, pending_amount=pending_amount)
