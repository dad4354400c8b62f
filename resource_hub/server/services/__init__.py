"""Server-side services: dependency providers and domain lookups."""
