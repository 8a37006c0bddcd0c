"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskResult, TaskError) + deadline parsing
- task_store.py: in-memory storage + query/update helpers
"""
