"""Generator auto-discovery and registration.

Scans palette_lab/generators/ for modules that define a `generator` object
of type Generator. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing — falls back to explicit imports
from generators/__init__.py).
"""

import importlib
import pkgutil

from palette_lab.core.types import Generator

_registry: dict[str, Generator] = {}

# Known generator module names — fallback for frozen binaries
_GENERATOR_MODULES = [
    'html',
    'json_dump',
    'scss',
    'swatches',
]


def discover() -> dict[str, Generator]:
    """Import all generator modules and return the registry."""
    if _registry:
        return _registry

    import palette_lab.generators as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    if not found_modules:
        found_modules = _GENERATOR_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'palette_lab.generators.{modname}')
        gen = getattr(module, 'generator', None)
        if isinstance(gen, Generator):
            gen.module = module
            _registry[gen.name] = gen

    return _registry


def get(name: str) -> Generator:
    """Get a generator by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown generator: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_generators() -> dict[str, Generator]:
    """Return all registered generators."""
    return discover()


def module_for(name: str) -> object:
    """The module that defines generator `name` (for docstring access)."""
    return get(name).module
