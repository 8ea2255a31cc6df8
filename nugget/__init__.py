"""Cut video intervals and burn re-timed captions into the joined clip."""
