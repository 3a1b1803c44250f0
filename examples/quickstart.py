"""Quickstart example for msgbundle.

This example demonstrates building bundles from several message sources,
deriving new bundles with modify(), and loading sources from files.
"""

import tempfile
from pathlib import Path

from msgbundle import InvalidArgumentError, MessageBundle
from msgbundle.core import is_babel_available
from msgbundle.sources import MapMessageSource, PropertiesMessageSource

# Example 1: First source wins, unknown keys fall back to themselves
print("=" * 50)
print("Example 1: Resolution Order")
print("=" * 50)

bundle = (
    MessageBundle.builder()
    .append_source(MapMessageSource({"a": "Apple"}))
    .append_source(MapMessageSource({"a": "Avocado", "b": "Banana"}))
    .build()
)

print(bundle.resolve("a"))
# Output: Apple
print(bundle.resolve("b"))
# Output: Banana
print(bundle.resolve("c"))
# Output: c

# Example 2: Deriving a bundle leaves the original intact
print("\n" + "=" * 50)
print("Example 2: modify()")
print("=" * 50)

patched = bundle.modify().prepend_source(MapMessageSource({"a": "Apricot"})).build()
print(patched.resolve("a"), "/", bundle.resolve("a"))
# Output: Apricot / Apple

# Example 3: Properties files
print("\n" + "=" * 50)
print("Example 3: Properties Files")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    defaults = Path(tmpdir) / "defaults.properties"
    defaults.write_text(
        "# Application defaults\n"
        "app.title = My Application\n"
        "app.footer = Built with msgbundle \\u2713\n",
        encoding="utf-8",
    )
    l10n = (
        MessageBundle.builder()
        .append_source(PropertiesMessageSource.from_path(defaults))
        .prepend_source(MapMessageSource({"app.title": "Custom Title"}))
        .build()
    )
    print(l10n.resolve("app.title"))
    # Output: Custom Title
    print(l10n.resolve("app.footer"))
    # Output: Built with msgbundle ✓

# Example 4: Gettext catalogs (requires: pip install msgbundle[babel])
print("\n" + "=" * 50)
print("Example 4: Gettext Catalogs")
print("=" * 50)

if is_babel_available():
    from babel.messages.catalog import Catalog

    from msgbundle.sources import CatalogMessageSource

    catalog = Catalog(locale="de")
    catalog.add("Hello", "Hallo")
    german = MessageBundle.builder().append_source(CatalogMessageSource.from_catalog(catalog)).build()
    print(german.resolve("Hello"), "/", german.resolve("Goodbye"))
    # Output: Hallo / Goodbye
else:
    print("Babel not installed; skipping.")

# Example 5: None is rejected immediately
print("\n" + "=" * 50)
print("Example 5: Argument Errors")
print("=" * 50)

try:
    bundle.resolve(None)  # type: ignore[arg-type]
except InvalidArgumentError as e:
    print(e.diagnostic.code.name if e.diagnostic else e)
    # Output: NULL_KEY
