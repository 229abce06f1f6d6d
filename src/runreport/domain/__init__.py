"""Domain layer: value objects, event shapes, ports and exceptions."""
