"""Core engine systems: data types, events, state, input and randomness."""
