"""Thread-safe key-value store with an interactive shell and file persistence."""