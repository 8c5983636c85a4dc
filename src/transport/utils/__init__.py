"""Pure helpers: validation, formatting and pagination."""
