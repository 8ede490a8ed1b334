"""Static data bundled with the world generator."""
