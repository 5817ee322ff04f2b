"""UI scenarios for the demo login and form pages."""
