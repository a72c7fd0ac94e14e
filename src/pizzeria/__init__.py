"""In-memory pizzeria entity stores with capability-typed repositories."""
