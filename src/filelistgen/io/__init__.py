"""Output handling for generated file lists."""
