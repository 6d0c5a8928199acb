"""Pydantic data models for the drip canvas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DripId = Union[int, str]


class DripView(BaseModel):
    """A drip as shown on the canvas page."""

    id: DripId
    url: Optional[str] = None
    name: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'DripView':
        return cls(
            id=row['id'],
            url=row.get('url'),
            name=row.get('username'),
            x=row.get('x'),
            y=row.get('y'),
        )


class DripUpdate(BaseModel):
    """One element of a position update batch.

    Only ``id`` is required. Fields left out of the request are not sent to
    the store, so the stored values of those columns are kept.
    """

    model_config = ConfigDict(extra='forbid')

    id: DripId
    x: Optional[float] = Field(default=None, allow_inf_nan=False)
    y: Optional[float] = Field(default=None, allow_inf_nan=False)
    url: Optional[str] = None
    username: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class Focus(BaseModel):
    x: float
    y: float


class QueryResult(BaseModel):
    """Rows read from the store, or the reason they could not be read."""

    data: List[Any] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
