"""
Task subsystem.

Components:
- task_models.py: Task record, input validation, schema migration
- task_store.py: whole-document store keyed by date
- file_storage.py: file-backed key-value storage
- task_api.py: read-modify-write mutations for one date
- notification_poller.py: once-a-minute daily reminder poller
"""
