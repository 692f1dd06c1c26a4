"""Services Layer — orchestrates lookup, core checks and logging."""
