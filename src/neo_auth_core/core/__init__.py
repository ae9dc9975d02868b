"""Core domain of the authentication core: contracts, entities and errors."""
