"""Runtime configuration shared by the game shell and tools."""
