#!/usr/bin/env python3
"""
Custom Renderer Example

Registers a renderer for a game-specific value type before the first
render pass, then inspects a component that uses it.
"""

import sys
from dataclasses import dataclass
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from debug_inspector import (  # noqa: E402
    Component,
    GameObject,
    Inspector,
    RecordingLayout,
    create_default_registry,
    inspect_field,
    inspectable,
)


@dataclass
class Health:
    current: float
    maximum: float


@inspectable
class Enemy(Component):
    label: str = inspect_field("Goblin")
    health: Health = inspect_field(default_factory=lambda: Health(35.0, 50.0))


def main():
    layout = RecordingLayout()
    registry = create_default_registry(layout)

    # Extensions go in before any inspection happens
    registry.register(
        Health,
        lambda name, value: layout.readonly_text(name, f"{value.current:.0f} / {value.maximum:.0f} HP"),
    )

    inspector = Inspector(registry, layout)
    enemy = GameObject("Enemy").add_component(Enemy)
    inspector.inspect(enemy)

    print(layout.format_records())


if __name__ == "__main__":
    main()
