from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


def _to_decimal(value: Any, name: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"{name} must be a finite number >= 0, got {value!r}")
    return amount


def _to_count(value: Any, name: str) -> int:
    # bool is an int subclass; a JSON true is not a count
    if value is None or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    if count < 0:
        raise ValueError(f"{name} must be >= 0")
    return count


def _require(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object with '{key}', got {type(payload).__name__}")
    if key not in payload:
        raise ValueError(f"missing field '{key}' in backend payload")
    return payload[key]


def _require_list(payload: Any, key: str) -> List[Any]:
    rows = _require(payload, key)
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise ValueError(f"'{key}' must be a list, got {type(rows).__name__}")
    return rows


def _to_day(value: Any) -> date:
    try:
        stamp = pd.to_datetime(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"date must be an ISO date, got {value!r}") from e
    if pd.isna(stamp):
        raise ValueError(f"date must be an ISO date, got {value!r}")
    return stamp.date()


@dataclass(frozen=True)
class Project:
    """A metered project. `secret_key` is the Sentinel Key shown to the user."""

    id: int
    name: str
    secret_key: str

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Project":
        return cls(
            id=_to_count(_require(payload, "id"), "id"),
            name=str(_require(payload, "name")),
            secret_key=str(_require(payload, "sentinel_key")),
        )


@dataclass(frozen=True)
class ProjectStats:
    project_name: str
    monthly_budget: int
    current_usage: Decimal

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "ProjectStats":
        return cls(
            project_name=str(_require(payload, "project_name")),
            monthly_budget=_to_count(_require(payload, "monthly_budget"), "monthly_budget"),
            current_usage=_to_decimal(_require(payload, "current_usage"), "current_usage"),
        )

    @property
    def budget_used_pct(self) -> Optional[float]:
        if self.monthly_budget == 0:
            return None
        return float(self.current_usage / self.monthly_budget * 100)


@dataclass(frozen=True)
class DailyUsage:
    date: date
    cost: Decimal


@dataclass(frozen=True)
class ProjectAnalytics:
    total_requests: int
    average_cost_per_request: Decimal
    usage_last_30_days: Tuple[DailyUsage, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "ProjectAnalytics":
        points = []
        for raw in _require_list(payload, "usage_last_30_days"):
            # Backend may send full ISO timestamps; only the day matters here.
            day = _to_day(_require(raw, "date"))
            points.append(DailyUsage(date=day, cost=_to_decimal(_require(raw, "cost"), "cost")))
        points.sort(key=lambda p: p.date)
        return cls(
            total_requests=_to_count(_require(payload, "total_requests"), "total_requests"),
            average_cost_per_request=_to_decimal(
                _require(payload, "average_cost_per_request"), "average_cost_per_request"
            ),
            usage_last_30_days=tuple(points),
        )

    def usage_frame(self) -> pd.DataFrame:
        """Chronological (date, cost) frame for charting."""
        if not self.usage_last_30_days:
            return pd.DataFrame(columns=["date", "cost"])
        return pd.DataFrame(
            {
                "date": [pd.Timestamp(p.date) for p in self.usage_last_30_days],
                "cost": [float(p.cost) for p in self.usage_last_30_days],
            }
        )


@dataclass(frozen=True)
class ModelUsage:
    model: str
    requests: int
    cost: Decimal

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "ModelUsage":
        return cls(
            model=str(_require(payload, "model")),
            requests=_to_count(payload.get("requests", payload.get("total_requests", 0)), "requests"),
            cost=_to_decimal(payload.get("cost", payload.get("total_cost", 0)), "cost"),
        )


def model_usage_frame(rows: List[ModelUsage]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Model": [r.model for r in rows],
            "Requests": [r.requests for r in rows],
            "Cost": [float(r.cost) for r in rows],
        }
    )


@dataclass(frozen=True)
class ProjectDetail:
    """Joined result of the project detail reads."""

    stats: ProjectStats
    analytics: ProjectAnalytics
    models: Optional[Tuple[ModelUsage, ...]] = None
