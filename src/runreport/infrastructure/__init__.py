"""Infrastructure: output routing, color rendering, event encoding."""
