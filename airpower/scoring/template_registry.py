"""
Template Registry
airpower/scoring/template_registry.py

Named aircraft and ship templates, used by front-ends to populate
selectable options and to build fresh instances per calculation.

Template files are JSON objects keyed by display name:

    aircraft:  {"Reppuu": {"name": "Reppuu", "type": "KS", "ack": 10, ...}}
    ships:     {"Akagi":  {"name": "Akagi", "slotComposition": [20, 20, 32, 10]}}

Resolving an unknown name never raises: ships fall back to the
unassigned placeholder and aircraft to ``None``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from airpower.config import Settings
from airpower.core.exceptions import TemplateConfigError
from airpower.models.templates import AircraftTemplate, ShipTemplate
from airpower.scoring.aircraft import DEFAULT_PROFICIENCY, Aircraft, create_aircraft
from airpower.scoring.catalog import AircraftCatalog
from airpower.scoring.ship import Ship, unassigned_ship

logger = logging.getLogger(__name__)

TemplateConfig = Union[Mapping[str, Any], Iterable[Mapping[str, Any]]]


def _entries(config: TemplateConfig) -> List[Mapping[str, Any]]:
    if isinstance(config, Mapping):
        return list(config.values())
    return list(config)


def _read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.error("Failed to read template file: %s", path)
        raise TemplateConfigError(f"Cannot read template file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON in template file: %s", path)
        raise TemplateConfigError(f"Invalid JSON in template file {path}: {exc}") from exc


class TemplateRegistry:
    """Aircraft and ship templates keyed by display name."""

    def __init__(self, catalog: AircraftCatalog, default_proficiency: int = DEFAULT_PROFICIENCY):
        self.catalog = catalog
        self.default_proficiency = default_proficiency
        self._aircraft: Dict[str, AircraftTemplate] = {}
        self._ships: Dict[str, ShipTemplate] = {}

    @classmethod
    def from_settings(cls, catalog: AircraftCatalog, settings: Settings) -> "TemplateRegistry":
        """Registry preloaded from the template paths configured in settings."""
        registry = cls(catalog, default_proficiency=settings.DEFAULT_PROFICIENCY)
        if settings.AIRCRAFT_TEMPLATES_PATH:
            registry.load_aircraft_file(settings.AIRCRAFT_TEMPLATES_PATH)
        if settings.SHIP_TEMPLATES_PATH:
            registry.load_ship_file(settings.SHIP_TEMPLATES_PATH)
        return registry

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_aircraft(self, template: AircraftTemplate) -> None:
        """
        Raises:
            UnknownAircraftType: if the template's type code is not in the catalog.
        """
        self.catalog.resolve_type_code(template.type)
        self._aircraft[template.name] = template

    def register_ship(self, template: ShipTemplate) -> None:
        self._ships[template.name] = template

    def load_aircraft_templates(self, config: TemplateConfig) -> int:
        count = 0
        for entry in _entries(config):
            try:
                template = AircraftTemplate.model_validate(entry)
            except ValidationError as exc:
                raise TemplateConfigError(f"Invalid aircraft template {entry!r}: {exc}") from exc
            self.register_aircraft(template)
            count += 1
        logger.info("templates_loaded", extra={"kind": "aircraft", "count": count})
        return count

    def load_ship_templates(self, config: TemplateConfig) -> int:
        count = 0
        for entry in _entries(config):
            try:
                template = ShipTemplate.model_validate(entry)
            except ValidationError as exc:
                raise TemplateConfigError(f"Invalid ship template {entry!r}: {exc}") from exc
            self.register_ship(template)
            count += 1
        logger.info("templates_loaded", extra={"kind": "ship", "count": count})
        return count

    def load_aircraft_file(self, path: Union[str, Path]) -> int:
        return self.load_aircraft_templates(_read_json(path))

    def load_ship_file(self, path: Union[str, Path]) -> int:
        return self.load_ship_templates(_read_json(path))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def aircraft_names(self) -> List[str]:
        return list(self._aircraft)

    def ship_names(self) -> List[str]:
        return list(self._ships)

    def make_aircraft(self, name: str) -> Optional[Aircraft]:
        """New Aircraft from the named template, or None for an unknown name."""
        template = self._aircraft.get(name)
        if template is None:
            return None
        type_def = self.catalog.resolve_type_code(template.type)
        proficiency = template.proficiency
        if "proficiency" not in template.model_fields_set:
            proficiency = self.default_proficiency
        return create_aircraft(
            self.catalog,
            name=template.name,
            type_id=type_def.id,
            attack=template.attack,
            intercept=template.intercept,
            anti_bomber_power=template.anti_bomber_power,
            search=template.search,
            proficiency=proficiency,
            improvement_level=template.improvement_level,
        )

    def get_ship(self, name: str) -> Ship:
        """New Ship from the named template, or the unassigned placeholder."""
        template = self._ships.get(name)
        if template is None:
            return unassigned_ship(self.catalog)
        return Ship(
            template.name,
            template.slot_capacities,
            template.is_air_base,
            catalog=self.catalog,
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def aircraft_templates_json(self) -> str:
        exported = {}
        for name in self._aircraft:
            exported[name] = self.make_aircraft(name).to_snapshot().model_dump(by_alias=True)
        return json.dumps(exported, ensure_ascii=False)

    def ship_templates_json(self) -> str:
        exported = {}
        for name in self._ships:
            exported.update(self.get_ship(name).to_snapshot())
        return json.dumps(exported, ensure_ascii=False)
