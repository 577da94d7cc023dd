"""LiveViews for web adapter."""
