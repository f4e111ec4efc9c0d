"""
Result Envelope

The unit returned to API callers and stored in the result cache:

    {
        "meta": {"timestamp": "...Z", "status": {"hhs": true, "maine": false, "texas": true}},
        "data": {"hhs": [...], "maine": [], "texas": [...]}
    }
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from ..sources.base.source_result import Record, SourceResult


def isoformat_utc(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class EnvelopeMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    status: Dict[str, bool]


class ResultEnvelope(BaseModel):
    """Unified response combining every source's records and status"""
    model_config = ConfigDict(frozen=True)

    meta: EnvelopeMeta
    data: Dict[str, List[Record]]

    @classmethod
    def from_results(cls, source_names: Iterable[str], results: Dict[str, SourceResult],
                     completed_at: Optional[datetime] = None) -> "ResultEnvelope":
        """
        Assemble an envelope from per-source results.

        Sources without a result, or whose result failed, get a false status
        and an empty list.
        """
        completed_at = completed_at or datetime.now(timezone.utc)
        status: Dict[str, bool] = {}
        data: Dict[str, List[Record]] = {}

        for name in source_names:
            result = results.get(name)
            succeeded = result is not None and result.success
            status[name] = succeeded
            data[name] = [dict(record) for record in result.records] if succeeded else []

        return cls(meta=EnvelopeMeta(timestamp=isoformat_utc(completed_at), status=status), data=data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
