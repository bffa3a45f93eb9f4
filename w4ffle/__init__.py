"""w4ffle: daily visual puzzle API."""
