"""Terminal front end: renders engine snapshots and reads player keys."""
