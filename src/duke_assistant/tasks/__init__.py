"""
Task subsystem.

Components:
- task_models.py: the Task entity, its timing variants and date helpers
- task_list.py: ordered in-memory collection with 1-based index rules
- task_store.py: line-oriented file storage + record parsing
"""
