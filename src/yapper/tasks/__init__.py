"""
Task subsystem.

Components:
- task_models.py: data structures (Todo, Deadline, Event, TaskKind)
- task_codec.py: pipe-delimited line <-> task conversion
- task_store.py: flat-file storage (bootstrap, load, save)
- task_list.py: the in-memory, 1-based task collection used by handlers
"""
