"""Runtime data model: atoms, sequences, closures and environments."""
