"""Sample data generators for tests and local seeding."""
