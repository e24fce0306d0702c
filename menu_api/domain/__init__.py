"""Pure helpers for menu records (no storage, no HTTP)."""
