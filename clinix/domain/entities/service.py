from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


SERVICE_CATEGORIES: tuple[str, ...] = ("Hair", "Nails", "Skin", "Massage", "Other")


class ServiceStatus(str, Enum):
    active = "active"
    inactive = "inactive"


@dataclass
class Service:
    id: str
    name: str
    description: str
    price: Decimal
    duration: int  # minutes
    category: str = "Other"  # open set, see SERVICE_CATEGORIES
    status: ServiceStatus = ServiceStatus.active
