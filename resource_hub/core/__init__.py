"""Core building blocks: persistence, domain models, errors and logging."""
