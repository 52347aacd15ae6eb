"""Interactive selection state machine."""
