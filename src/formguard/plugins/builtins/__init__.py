"""Built-in plugins shipped with formguard."""
