"""dragboard - drag-and-drop reordering engine for kanban boards."""
