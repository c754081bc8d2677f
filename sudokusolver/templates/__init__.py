"""Template registry and base class."""

from __future__ import annotations

import random
from typing import Dict, Optional, Type

from ..core.grid import Grid


class Template:
    """Base grid template."""
    name: str = "template"
    description: str = ""

    def build(self, rng: random.Random) -> Grid:  # pragma: no cover - overridden
        return Grid.empty()


TEMPLATE_REGISTRY: Dict[str, Type[Template]] = {}


def register_template(cls: Type[Template]) -> Type[Template]:
    TEMPLATE_REGISTRY[cls.name] = cls
    return cls


def get_template(name: str) -> Template:
    return TEMPLATE_REGISTRY[name]()


def build_template(name: str, rng: Optional[random.Random] = None) -> Grid:
    """Build the named template, drawing any randomness from ``rng``."""
    return get_template(name).build(rng if rng is not None else random.Random())


# register the bundled templates
from . import example, random_fill  # noqa: E402,F401
