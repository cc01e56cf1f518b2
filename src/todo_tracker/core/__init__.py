"""
Core building blocks shared by the task store and its front-ends.

- errors.py: TaskError family (validation / not found / storage)
- ports.py: Protocols the store depends on (TaskStorage)
- state.py: AppState carried through the console front-end
"""
