"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PosType(StrEnum):
    CAFE = "CAFE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"
    VENDING_MACHINE = "VENDING_MACHINE"


class CampusType(StrEnum):
    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"
