"""Gathering (pick point) parameter structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from .item_table_def import ItemTableGroupSettingDef

if TYPE_CHECKING:
    from .map_def import MapPickPointDef


@dataclass(slots=True, eq=False)
class CommonPickParamDef:
    """Shared parameters for common gathering and fishing spots."""

    id: str
    raw: Dict[str, Any] = field(repr=False)
    drop: ItemTableGroupSettingDef | None = None
    params: List["PickParamDef"] = field(default_factory=list, repr=False)


@dataclass(slots=True, eq=False)
class VegetableParamDef:
    """Vegetable plot parameters. Drop tables are not linked."""

    id: str
    raw: Dict[str, Any] = field(repr=False)
    params: List["PickParamDef"] = field(default_factory=list, repr=False)


@dataclass(slots=True, eq=False)
class PickParamDef:
    id: str
    raw: Dict[str, Any] = field(repr=False)
    common: CommonPickParamDef | None = None
    fishing: CommonPickParamDef | None = None
    vegetable: VegetableParamDef | None = None
    groups: List["PickPointGroupDataDef"] = field(default_factory=list, repr=False)


@dataclass(slots=True, eq=False)
class PickPointGroupDataDef:
    group: "PickPointGroupDef" = field(repr=False)
    raw: Dict[str, Any] = field(repr=False)
    param: PickParamDef | None = None


@dataclass(slots=True, eq=False)
class PickPointGroupDef:
    id: str
    raw: Dict[str, Any] = field(repr=False)
    data: List[PickPointGroupDataDef] = field(default_factory=list)
    maps: List["MapPickPointDef"] = field(default_factory=list, repr=False)
