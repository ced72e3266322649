"""Top-level powerups commands (auto-discovered by the dispatcher)."""
