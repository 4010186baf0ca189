"""Auto-discovery of generator modules.

Every .py file in this package that defines a `generator` object is
auto-registered by palette_lab.registry.discover().

The explicit imports below ensure frozen binaries include these modules.
Without them, pkgutil.iter_modules cannot find the generator files at runtime.
"""

# Hidden imports — keep this list in sync with generator modules
import palette_lab.generators.html as _html  # noqa: F401
import palette_lab.generators.json_dump as _json_dump  # noqa: F401
import palette_lab.generators.scss as _scss  # noqa: F401
import palette_lab.generators.swatches as _swatches  # noqa: F401
