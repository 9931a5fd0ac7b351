from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from catpoker.engine.types import Card, CardCatalog, ColorCode, FiberCode, RulesConfig
from catpoker.paths import get_paths

logger = logging.getLogger(__name__)

CATALOG_FILE = "catalog.json"
CATALOG_SCHEMA_FILE = "catalog.schema.json"


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.absolute_path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


def _parse_card(raw: Mapping[str, object]) -> Card:
    try:
        color = ColorCode(_require_int(raw, "color"))
        fiber = FiberCode(_require_int(raw, "fiber"))
    except ValueError as e:
        raise ContentError(f"Invalid card entry {dict(raw)}: {e}") from e
    return Card(id=_require_int(raw, "id"), color=color, fiber=fiber)


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path, config: RulesConfig | None = None) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir
        self._config = config or RulesConfig()

    def load_catalog(self) -> CardCatalog:
        path = self._data_dir / CATALOG_FILE
        raw = _load_json(path)
        schema = _load_json(self._schema_dir / CATALOG_SCHEMA_FILE)
        validate_json(raw, schema, context=str(path))

        if not isinstance(raw, dict):
            raise ContentError(f"{CATALOG_FILE} must be an object")
        raw_cards = raw.get("cards")
        if not isinstance(raw_cards, list):
            raise ContentError(f"{CATALOG_FILE}.cards must be a list")

        cards: list[Card] = []
        for item in raw_cards:
            if not isinstance(item, dict):
                raise ContentError(f"{CATALOG_FILE}.cards entries must be objects")
            cards.append(_parse_card(item))

        # Shape contract: exactly catalog_size entries, ids dense and in order
        expected = self._config.catalog_size
        if len(cards) != expected:
            raise ContentError(f"Catalog must hold exactly {expected} cards (got {len(cards)})")
        for index, card in enumerate(cards):
            if card.id != index:
                raise ContentError(f"Catalog ids must be dense and ordered: position {index} has id {card.id}")

        logger.info("Loaded %d cards from %s", len(cards), path)
        return CardCatalog(cards=tuple(cards))

    def validate_all(self) -> None:
        # Load is validation (schema + parse + shape)
        _ = self.load_catalog()


@lru_cache(maxsize=1)
def default_catalog() -> CardCatalog:
    """The process-wide catalog, loaded once from the packaged (or overridden) data dir."""
    paths = get_paths()
    return ContentService(paths.data_dir, paths.schema_dir).load_catalog()
