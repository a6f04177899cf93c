# Schemas package init
"""
Irenet Backend — Pydantic Schemas
=================================

One module per resource, plus `common` for the envelopes shared by every
endpoint (error body, status-update message, health).

Request bodies declare every field Optional: presence is checked by the
services so a missing field is a 400 with a static message rather than
FastAPI's default 422.
"""
