"""Front-ends that drive the task store (currently: the console menu)."""
