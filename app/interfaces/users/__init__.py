"""HTTP interface for the users bounded context."""
