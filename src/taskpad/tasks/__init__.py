"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ToDo, Deadline, Event)
- task_list.py: ordered in-memory collection
- task_store.py: flat text store (encode / replay)
"""
