"""In-memory data stores backing the default (non-MongoDB) mode."""

from typing import Any, Dict

# Serialized state records keyed by client id, standing in for browser storage.
state_records: Dict[str, str] = {}

# Live workspaces (store, transient UI, mounted views) keyed by client id.
workspaces: Dict[str, Any] = {}
