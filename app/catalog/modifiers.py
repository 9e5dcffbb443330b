"""
Modifier lists attached to menu items.

MODIFIER and MODIFIER_LIST objects become lookup maps once per catalog;
each item then picks the lists it references. An item can reference its
lists in three places, checked in order:
  1. itemData.modifierListInfo.modifierLists
  2. itemData.modifierListInfo when it is itself an array
  3. itemData.modifierLists
"""
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from app.catalog import fields
from app.catalog.models import (
    CatalogItem,
    CatalogModifier,
    CatalogModifierList,
    Modifier,
    ModifierList,
)
from app.square.money import square_money_to_dollars

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModifierListRef:
    list_id: str
    enabled: bool = True
    min_selected: Optional[int] = None


def _modifier_from(obj: CatalogModifier, fallback_id: Any = None) -> Optional[Modifier]:
    name = obj.name
    modifier_id = obj.id or fallback_id
    if not isinstance(name, str) or not name or not isinstance(modifier_id, str):
        return None
    return Modifier(
        id=modifier_id,
        name=name,
        price=square_money_to_dollars(obj.price_amount),
        square_id=modifier_id,
    )


def build_modifier_map(
    modifiers: Iterable[CatalogModifier],
    log: logging.Logger = logger,
) -> dict[str, Modifier]:
    modifier_map: dict[str, Modifier] = {}
    for obj in modifiers:
        modifier = _modifier_from(obj)
        if modifier is None:
            log.debug("Modifier %s has no name, skipped", obj.id)
            continue
        modifier_map[modifier.id] = modifier
        log.debug("Mapped modifier: %s -> %s ($%.2f)", modifier.id, modifier.name, modifier.price)
    return modifier_map


def _modifier_ref_id(entry: Any) -> Any:
    if isinstance(entry, str):
        return entry
    return fields.probe(entry, fields.MODIFIER_REF_ID)


def build_modifier_list_map(
    modifier_lists: Iterable[CatalogModifierList],
    modifier_map: Mapping[str, Modifier],
    log: logging.Logger = logger,
) -> dict[str, ModifierList]:
    """
    Build modifierListId -> ModifierList.

    Modifiers are looked up by the ids the list references. When none of
    them resolve, modifiers embedded in the list itself are used instead.
    Lists without a name are skipped. `required` is left False here and
    decided per item.
    """
    list_map: dict[str, ModifierList] = {}

    for mod_list in modifier_lists:
        name = mod_list.name
        if not isinstance(name, str) or not name or not mod_list.id:
            continue

        entries = mod_list.modifier_entries
        modifiers = [
            modifier_map[ref]
            for ref in (_modifier_ref_id(e) for e in entries)
            if isinstance(ref, str) and ref in modifier_map
        ]
        if not modifiers:
            for entry in entries:
                if not isinstance(entry, dict):
                    continue
                embedded = _modifier_from(CatalogModifier(entry), entry.get("modifierId"))
                if embedded is not None:
                    modifiers.append(embedded)

        log.debug('Modifier list "%s": %d entries, %d modifiers', name, len(entries), len(modifiers))
        list_map[mod_list.id] = ModifierList(
            id=mod_list.id,
            name=name,
            selection_type=mod_list.selection_type,
            modifiers=tuple(modifiers),
            square_id=mod_list.id,
        )

    return list_map


def _ref_entries(item: CatalogItem) -> list:
    info = fields.probe(item.raw, fields.ITEM_MODIFIER_LIST_INFO)
    if isinstance(info, dict) and isinstance(info.get("modifierLists"), list):
        return info["modifierLists"]
    if isinstance(info, list):
        return info
    direct = fields.probe(item.raw, fields.ITEM_MODIFIER_LISTS)
    return direct if isinstance(direct, list) else []


def modifier_list_refs(item: CatalogItem) -> list[ModifierListRef]:
    refs = []
    for entry in _ref_entries(item):
        if isinstance(entry, str):
            refs.append(ModifierListRef(list_id=entry))
            continue
        list_id = fields.probe(entry, fields.MODIFIER_LIST_REF_ID)
        if not isinstance(list_id, str) or not list_id:
            continue
        min_selected = fields.probe(entry, fields.MODIFIER_LIST_REF_MIN_SELECTED)
        refs.append(ModifierListRef(
            list_id=list_id,
            enabled=entry.get("enabled") is not False,
            min_selected=min_selected if isinstance(min_selected, int) else None,
        ))
    return refs


def is_required(ref: ModifierListRef, modifier_list: ModifierList) -> bool:
    # A SINGLE-select list that is enabled on the item must have a choice
    if (ref.min_selected or 0) > 0:
        return True
    return ref.enabled and modifier_list.selection_type == "SINGLE"


def item_modifier_lists(
    item: CatalogItem,
    list_map: Mapping[str, ModifierList],
    log: logging.Logger = logger,
) -> tuple[ModifierList, ...]:
    refs = modifier_list_refs(item)
    resolved = tuple(
        list_map[ref.list_id].model_copy(update={"required": is_required(ref, list_map[ref.list_id])})
        for ref in refs
        if ref.list_id in list_map
    )
    if refs:
        log.debug(
            'Item "%s" references %d modifier list(s), %d found',
            item.name or item.id,
            len(refs),
            len(resolved),
        )
    return resolved
