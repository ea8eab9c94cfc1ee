"""Install and uninstall workflow logic."""
