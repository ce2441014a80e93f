"""Use cases for the users bounded context."""
