"""Infrastructure layer - adapters, database wiring, logging, event bus."""
