"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ToDo, Deadline, Event, TaskType)
- task_list.py: ordered in-memory collection with index-based operations
- task_store.py: line-oriented storage codec + file-backed TaskStore
"""
