"""Orders bounded context: checkout and order lifecycle."""
