"""Business statistics read models (pydantic v2, immutable)."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AgentLinkInfoDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_id: UUID
    agent_name: str
    link_count: int


class LinksCreatedStatsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    manager_links: int
    agent_links: int
    total: int
    links_per_agent: Dict[str, AgentLinkInfoDTO]


class MonthlyDataDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    month_name: str
    revenue: Decimal
    completed_orders: int


class BusinessStatsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    links_created_this_month: LinksCreatedStatsDTO
    orders_by_status: Dict[str, int]
    monthly_income: Decimal
    completed_orders_count: int
    yearly_data: List[MonthlyDataDTO]
