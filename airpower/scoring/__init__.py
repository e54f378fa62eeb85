"""
scoring/ - Air-Power Mastery Engine

Modules:
    utils.py                  - Truncation and improvement clamping
    catalog.py                - Aircraft types, correction and scouting rules
    aircraft.py               - Aircraft value objects and factory
    mastery_functions.py      - Per-slot formulas and revision lookups
    ship.py                   - Slots, ships/air-bases, snapshots
    fleet.py                  - Fleet aggregation and high-altitude revision
    template_registry.py      - Named aircraft/ship templates
    integration_service.py    - Selection → fleet mastery pipeline
"""
