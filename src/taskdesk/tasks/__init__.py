"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and id/seed helpers
- errors.py: gateway/validation error taxonomy
- remote_gateway.py: httpx client for the remote /todos API
- snapshot.py: JSON-file key-value storage
- task_store.py: in-memory list mirrored into the snapshot
- projection.py: search/status filtering and counters
- task_api.py: small high-level helpers used by the console
"""
