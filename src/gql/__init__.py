"""GraphQL query compilation and execution against the movie graph."""
