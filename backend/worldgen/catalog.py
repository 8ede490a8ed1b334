"""Read-only lookup of biome, item, enemy and resource definitions.

Definitions come from bundled static data.  An optional override store (a
DynamoDB table in production) is consulted first; if it is missing, fails,
or has no record, the static definition is used.  Callers never see which
source answered.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from botocore.exceptions import ClientError

from .aws_client import get_dynamodb_table, has_table_configured
from .base import Biome, EnemyDefinition, ItemDefinition, PoolEntry, ResourceDefinition
from .data import definitions
from .store import DecimalEncoder

logger = logging.getLogger(__name__)

DEFINITION_TABLE_ENV = "DEFINITION_TABLE"

BIOME = "biome"
ITEM = "item"
ENEMY = "enemy"
RESOURCE = "resource"


class DefinitionStore(Protocol):
    """Backing store for definition overrides."""

    def get_definition(self, kind: str, definition_id: str) -> Optional[Dict[str, Any]]:
        """Return the raw record for ``kind``/``definition_id`` or None.

        Backend failures raise; the catalog falls back without memoizing.
        """
        ...


class NullDefinitionStore:
    """No overrides: every lookup falls through to static data."""

    def get_definition(self, kind: str, definition_id: str) -> Optional[Dict[str, Any]]:
        return None


class DynamoDefinitionStore:
    """Definition overrides in a DynamoDB table keyed by ``kind`` + ``id``."""

    def __init__(self, table_env_var: str = DEFINITION_TABLE_ENV):
        self._table_env_var = table_env_var

    @property
    def _table(self):
        return get_dynamodb_table(self._table_env_var)

    def get_definition(self, kind: str, definition_id: str) -> Optional[Dict[str, Any]]:
        try:
            item = self._table.get_item(Key={"kind": kind, "id": definition_id}).get("Item")
        except ClientError as e:
            logger.warning(f"Definition table lookup failed for {kind}/{definition_id}: {e}")
            raise
        if not item:
            return None
        return json.loads(json.dumps(item, cls=DecimalEncoder))


def default_definition_store() -> DefinitionStore:
    """DynamoDB overrides when DEFINITION_TABLE is set, otherwise none."""
    if has_table_configured(DEFINITION_TABLE_ENV):
        return DynamoDefinitionStore()
    return NullDefinitionStore()


# ---------------------------------------------------------------------------
# Record -> definition builders
# ---------------------------------------------------------------------------


def biome_from_record(
    record: Dict[str, Any], compatible: Iterable[str] = (), exit_hint: str = ""
) -> Biome:
    """Build a biome; ``compatible`` and ``exit_hint`` fill in fields the record omits."""
    return Biome(
        id=record["id"],
        name=record["name"],
        name_templates=tuple(record["name_templates"]),
        description_templates=tuple(record["description_templates"]),
        base_encounter_chance=float(record["base_encounter_chance"]),
        compatible=frozenset(record.get("compatible", compatible)),
        exit_hint=record.get("exit_hint", exit_hint),
    )


def item_from_record(record: Dict[str, Any]) -> ItemDefinition:
    return ItemDefinition(
        id=record["id"],
        name=record["name"],
        description=record["description"],
        type=record["type"],
        value=int(record.get("value", 0)),
        equip_slot=record.get("equip_slot"),
        effect=record.get("effect"),
    )


def enemy_from_record(record: Dict[str, Any]) -> EnemyDefinition:
    return EnemyDefinition(
        id=record["id"],
        name=record["name"],
        description=record["description"],
        health=int(record["health"]),
        attack=int(record["attack"]),
        defense=int(record["defense"]),
        xp_reward=int(record["xp_reward"]),
        loot_table=tuple(record.get("loot_table", ())),
    )


def resource_from_record(record: Dict[str, Any]) -> ResourceDefinition:
    return ResourceDefinition(
        id=record["id"],
        name=record["name"],
        description=record["description"],
        required_tool=record.get("required_tool"),
        yields=tuple(record.get("yields", ())),
        respawn_seconds=int(record.get("respawn_seconds", 0)),
    )


def _pool(records: List[Dict[str, Any]]) -> List[PoolEntry]:
    return [
        PoolEntry(
            biome_id=r["biome"],
            definition_id=r["id"],
            spawn_weight=r["weight"],
            min_difficulty=r.get("min", 1),
            max_difficulty=r.get("max", 10),
        )
        for r in records
    ]


_BUILDERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    BIOME: biome_from_record,
    ITEM: item_from_record,
    ENEMY: enemy_from_record,
    RESOURCE: resource_from_record,
}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class DefinitionCatalog:
    """Single lookup point for every kind of definition.

    Args:
        store: override store; defaults to :class:`NullDefinitionStore`.
        biomes: replaces the bundled biome list (catalog order matters).
        item_pool, enemy_pool, resource_pool: replace the bundled pools.
    """

    def __init__(
        self,
        store: Optional[DefinitionStore] = None,
        biomes: Optional[List[Biome]] = None,
        item_pool: Optional[List[PoolEntry]] = None,
        enemy_pool: Optional[List[PoolEntry]] = None,
        resource_pool: Optional[List[PoolEntry]] = None,
    ):
        self._store = store or NullDefinitionStore()
        if biomes is None:
            biomes = [
                biome_from_record(record, definitions.COMPATIBILITY.get(record["id"], []))
                for record in definitions.BIOMES
            ]
        self._biome_order: List[str] = [b.id for b in biomes]
        self._static: Dict[str, Dict[str, Any]] = {
            BIOME: {b.id: b for b in biomes},
            ITEM: {r["id"]: item_from_record(r) for r in definitions.ITEMS},
            ENEMY: {r["id"]: enemy_from_record(r) for r in definitions.ENEMIES},
            RESOURCE: {r["id"]: resource_from_record(r) for r in definitions.RESOURCES},
        }
        self._pools: Dict[str, List[PoolEntry]] = {
            ITEM: item_pool if item_pool is not None else _pool(definitions.ITEM_POOLS),
            ENEMY: enemy_pool if enemy_pool is not None else _pool(definitions.ENEMY_POOLS),
            RESOURCE: (
                resource_pool if resource_pool is not None else _pool(definitions.RESOURCE_POOLS)
            ),
        }
        self._resolved: Dict[Tuple[str, str], Any] = {}
        self._lock = threading.Lock()

    def _lookup(self, kind: str, definition_id: str):
        key = (kind, definition_id)
        with self._lock:
            if key in self._resolved:
                return self._resolved[key]

        static = self._static[kind].get(definition_id)
        definition = None
        try:
            record = self._store.get_definition(kind, definition_id)
            if record:
                definition = self._build(kind, record, static)
        except Exception as e:
            # Not memoized, so the override is picked up once the store recovers.
            logger.debug(f"Definition store lookup failed for {kind}/{definition_id}: {e}")
            return static
        if definition is None:
            definition = static

        with self._lock:
            self._resolved[key] = definition
        return definition

    @staticmethod
    def _build(kind: str, record: Dict[str, Any], static):
        if kind == BIOME and static is not None:
            # Overrides may carry only flavor; links to other biomes stay as bundled.
            return biome_from_record(record, static.compatible, static.exit_hint)
        return _BUILDERS[kind](record)

    def get_biome(self, biome_id: str) -> Optional[Biome]:
        return self._lookup(BIOME, biome_id)

    def get_item(self, item_id: str) -> Optional[ItemDefinition]:
        return self._lookup(ITEM, item_id)

    def get_enemy(self, enemy_id: str) -> Optional[EnemyDefinition]:
        return self._lookup(ENEMY, enemy_id)

    def get_resource(self, resource_id: str) -> Optional[ResourceDefinition]:
        return self._lookup(RESOURCE, resource_id)

    def get_all_biomes(self) -> List[Biome]:
        """All biomes in catalog order."""
        biomes = [self.get_biome(biome_id) for biome_id in self._biome_order]
        return [b for b in biomes if b is not None]

    def biome_ids(self) -> List[str]:
        return list(self._biome_order)

    def get_pool(self, kind: str, biome_id: str) -> List[PoolEntry]:
        """Pool entries of ``kind`` (item, enemy or resource) for a biome."""
        return [entry for entry in self._pools[kind] if entry.biome_id == biome_id]
