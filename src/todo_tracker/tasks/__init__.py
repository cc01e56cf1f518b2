"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskCollection)
- task_store.py: in-memory collection + id assignment, persisted through a TaskStorage port
"""
