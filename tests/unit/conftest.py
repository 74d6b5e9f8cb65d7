"""Shared test fixtures."""

from typing import Any

import pytest

from pokedex_browser.config import POKEMON_RESOURCE_PREFIX
from pokedex_browser.core.decoders import decode_detail_record, decode_list_response
from pokedex_browser.models.pokemon import CatalogEntry, PokemonDetail
from tests.unit.fakes import FakeGateway


def make_list_body(*names: str) -> dict[str, Any]:
    """List endpoint body with ids numbered from 1."""
    return {
        "count": 1302,
        "next": None,
        "previous": None,
        "results": [
            {"name": name, "url": f"{POKEMON_RESOURCE_PREFIX}/{i}/"}
            for i, name in enumerate(names, start=1)
        ],
    }


def make_detail_body(
    pokemon_id: int = 1,
    name: str = "bulbasaur",
    base_experience: int = 64,
    types: tuple[str, ...] = ("grass", "poison"),
) -> dict[str, Any]:
    """Detail endpoint body with a few realistic extra fields."""
    return {
        "id": pokemon_id,
        "name": name,
        "base_experience": base_experience,
        "height": 7,
        "weight": 69,
        "types": [
            {"slot": slot, "type": {"name": t, "url": f"https://pokeapi.co/api/v2/type/{slot}/"}}
            for slot, t in enumerate(types, start=1)
        ],
        "abilities": [{"ability": {"name": "overgrow"}, "is_hidden": False}],
        "sprites": {"front_default": None, "other": {"home": {"front_default": None}}},
    }


@pytest.fixture
def catalog() -> tuple[CatalogEntry, ...]:
    return decode_list_response(make_list_body("bulbasaur", "ivysaur", "venusaur", "Pikachu"))


@pytest.fixture
def bulbasaur() -> PokemonDetail:
    return decode_detail_record(make_detail_body())


@pytest.fixture
def gateway(catalog: tuple[CatalogEntry, ...], bulbasaur: PokemonDetail) -> FakeGateway:
    """Gateway with the four-entry catalog and details for #1 and #2."""
    ivysaur = decode_detail_record(make_detail_body(2, "ivysaur", 142))
    return FakeGateway(catalog=catalog, details={1: bulbasaur, 2: ivysaur})
