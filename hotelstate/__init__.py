"""Hotel state persistence: tagged-text codec for rooms, reservations and guests."""
