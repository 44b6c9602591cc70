"""Domain layer: entities and repository ports, free of framework imports."""
