"""Infrastructure: persistence, security, and other external adapters."""
