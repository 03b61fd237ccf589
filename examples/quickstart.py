"""Quickstart example for flatl10n.

Shows flattening a nested translation tree, looking keys up through scopes,
custom separators and aliases, and inspecting the link table.
"""

from flatl10n import AliasRef, CyclicAliasError, FlatBackend, FlattenConfig, KeyFlattener

# Example 1: Flattening
print("=" * 50)
print("Example 1: Flattening a Tree")
print("=" * 50)

flattener = KeyFlattener()
tree = {
    "app": {"title": "Inventory", "version.label": "Version"},
    "errors": {"404": {"title": "Not found"}},
}

for key, value in flattener.flatten_translations("en", tree).items():
    print(f"{key!r}: {value!r}")
# Output:
# 'app.title': 'Inventory'
# 'app.version\x01label': 'Version'
# 'errors.404.title': 'Not found'

print(flattener.flatten_translations("en", {"a": {"b": "c"}}, subtree=True))
# Output: {'a': {'b': 'c'}, 'a.b': 'c'}

# Example 2: Lookups
print("\n" + "=" * 50)
print("Example 2: Lookups")
print("=" * 50)

backend = FlatBackend()
backend.store_translations("en", {
    **tree,
    "errors": {
        "404": {"title": "Not found"},
        "not_found": AliasRef("errors.404"),
    },
})

print(backend.lookup("en", "app.title"))
# Output: Inventory
print(backend.lookup("en", "title", scope=["errors", "404"]))
# Output: Not found
print(backend.lookup("en", "app/version.label", separator="/"))
# Output: Version

# Example 3: Aliases
print("\n" + "=" * 50)
print("Example 3: Aliases")
print("=" * 50)

print(backend.normalize_keys("en", "errors.not_found.title"))
# Output: errors.404.title
print(backend.lookup("en", "errors.not_found.title"))
# Output: Not found
print(backend.links.get_stats())

backend.store_translations("en", {"ping": AliasRef("pong"), "pong": AliasRef("ping")})
try:
    backend.lookup("en", "ping")
except CyclicAliasError as e:
    print(f"Cycle detected: {e}")

# Example 4: Thread-safe backend with a custom default separator
print("\n" + "=" * 50)
print("Example 4: Configuration")
print("=" * 50)

safe_backend = FlatBackend(FlattenConfig(default_separator="/", thread_safe=True))
safe_backend.store_translations("de-AT", {"nav": {"home": "Startseite"}})
print(safe_backend.lookup("de_AT", "nav/home"))
# Output: Startseite
print(safe_backend.available_locales())
# Output: ('de_AT',)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
