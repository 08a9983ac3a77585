"""Terminal fireplace application."""
