"""Host adapters that embed the editing engine in a UI."""
