"""Configuration, logging and shared persistence primitives."""
