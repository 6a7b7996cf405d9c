"""FastAPI extension helpers: pagination, error envelopes, i18n and JWT context."""
