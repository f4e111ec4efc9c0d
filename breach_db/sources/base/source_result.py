"""
Source Result Types

A fetch attempt of one source always ends in a SourceResult: either a success
carrying the extracted records, or a failure carrying the error message. The
orchestrator only ever consumes these values, so a failing source can never
interrupt the other sources of the same run.

Record contract per source (no schema is shared across sources):
- hhs:   keys are the report table's header texts
- maine: always "URL", plus whatever "label: value" lines the detail page shows
- texas: every header text (None for missing cells) plus a constant "URL"
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

Record = Dict[str, Optional[str]]


@dataclass(frozen=True)
class SourceResult:
    """Outcome of one fetch attempt for one source"""
    source_name: str
    success: bool
    records: Tuple[Record, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @classmethod
    def ok(cls, source_name: str, records: List[Record]) -> "SourceResult":
        return cls(source_name=source_name, success=True, records=tuple(records))

    @classmethod
    def failed(cls, source_name: str, error: str) -> "SourceResult":
        return cls(source_name=source_name, success=False, error=error)

    def __len__(self) -> int:
        return len(self.records)
