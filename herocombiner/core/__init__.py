"""Core types shared across herocombiner."""
