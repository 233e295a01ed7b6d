"""Simulation engine: spawning, progression, the tick loop and its sinks."""
