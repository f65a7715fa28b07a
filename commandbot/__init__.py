"""Chat command bot: upstream API responses rendered as chat attachments."""
