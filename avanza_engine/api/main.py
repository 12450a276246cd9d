"""In-process engine factory used by the UI layer"""

from typing import Any, Dict, Optional

from avanza_engine.api.v1.report import build_report, parse_snapshot
from avanza_engine.config import settings
from avanza_engine.domain.state import Action, Snapshot, reduce
from avanza_engine.infrastructure.observability.logging import setup_logging


class BudgetEngine:
    """
    Facade over the calculation engines.

    Holds no state between calls: every method takes the full snapshot (or
    its plain-data payload) and returns a new value.
    """

    def load(self, payload: Dict[str, Any]) -> Snapshot:
        return parse_snapshot(payload)

    def apply(self, snapshot: Snapshot, action: Action) -> Snapshot:
        return reduce(snapshot, action)

    def report(self, snapshot: Snapshot, projection_months: Optional[int] = None) -> Dict[str, Any]:
        """Report as JSON-ready plain data"""
        return build_report(snapshot, projection_months=projection_months).model_dump(mode="json")

    def report_payload(self, payload: Dict[str, Any], projection_months: Optional[int] = None) -> Dict[str, Any]:
        return self.report(self.load(payload), projection_months=projection_months)


def create_engine(configure_logging: bool = True) -> BudgetEngine:
    """Create and configure the engine facade"""
    if configure_logging:
        setup_logging(settings.log_level)
    return BudgetEngine()
