"""Application layer: reporters, configuration and dispatch."""
