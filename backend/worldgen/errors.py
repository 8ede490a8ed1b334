"""Exceptions raised by the world generator."""


class WorldGenerationError(Exception):
    """Base class for generation failures that abort a room."""


class BiomeNotFoundError(WorldGenerationError, LookupError):
    """A biome id was selected that the definition catalog does not know."""

    def __init__(self, biome_id: str):
        super().__init__(f"Biome definition not found: {biome_id}")
        self.biome_id = biome_id
