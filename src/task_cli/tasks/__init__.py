"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON-file storage (load-all / save-all)
- task_api.py: pure operations over a loaded task collection
"""
