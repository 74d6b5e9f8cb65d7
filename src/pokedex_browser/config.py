"""Configuration constants for the Pokédex browser."""

# Read-only API root. All requests go below this URL.
API_BASE_URL: str = "https://pokeapi.co/api/v2"

# Catalog is fetched once, in a single page of this size.
CATALOG_LIMIT: int = 151

# Seconds; passed straight to requests, the core enforces no timeouts itself.
REQUEST_TIMEOUT: float = 10.0

# List entries carry URLs of the form f"{POKEMON_RESOURCE_PREFIX}/<id>/".
POKEMON_RESOURCE_PREFIX: str = f"{API_BASE_URL}/pokemon"

# Inspector nodes at this depth or deeper start collapsed.
INSPECTOR_INITIAL_DEPTH: int = 1

CATALOG_ERROR_MESSAGE: str = "Could not load the Pokédex. Please try again later."
DETAIL_ERROR_MESSAGE: str = "Could not load this Pokémon."
