"""Reference notes service that answers every route through response_kit."""
