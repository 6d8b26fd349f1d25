"""Pure domain services: aggregation and display formatting."""
