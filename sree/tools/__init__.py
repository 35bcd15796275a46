"""Tools the assistant can run, the registry that dispatches them, and a gitignore-aware walk."""