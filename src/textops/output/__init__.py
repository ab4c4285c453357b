"""Output formatting for OpResult (human text or JSON)."""
