"""Runtime configuration shared by build entry points."""
