import pytest

from filtrafood.filters import FilterCatalog, FilterDefinition


@pytest.fixture
def catalog():
    return FilterCatalog([
        FilterDefinition("db_vegan", "Végan", ("lait", "oeuf", "gélatine")),
        FilterDefinition("db_halal", "Halal", ("gélatine de porc", "porc", "alcool")),
        FilterDefinition("db_sans_gluten", "Sans Gluten", ("GLUTEN", "blé")),
        FilterDefinition("db_no_egg", None, ("egg",)),
        FilterDefinition("db_empty", "Vide", ()),
    ])
