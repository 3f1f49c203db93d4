"""JSON Schemas for the PROJECT file, one per config version."""
