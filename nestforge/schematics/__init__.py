"""Schematics integration -- the collection that generates project files.

Quick usage::

    from nestforge.schematics import collection_factory, map_schematic_options

    collection = collection_factory(config).create("@nestjs/schematics")
    await collection.execute("application", map_schematic_options(context))
"""

from nestforge.schematics.collection import (
    AbstractCollection,
    Collection,
    GenerationError,
    NestCollection,
    collection_factory,
)
from nestforge.schematics.options import (
    EXCLUDED_INPUT_NAMES,
    SchematicOption,
    map_schematic_options,
)

__all__ = [
    "AbstractCollection",
    "Collection",
    "EXCLUDED_INPUT_NAMES",
    "GenerationError",
    "NestCollection",
    "SchematicOption",
    "collection_factory",
    "map_schematic_options",
]
