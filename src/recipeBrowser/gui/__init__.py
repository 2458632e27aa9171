"""GUI-facing layer: view models, Qt bridges and factories."""
