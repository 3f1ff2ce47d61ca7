"""tododash - derived views over Todoist tasks."""
