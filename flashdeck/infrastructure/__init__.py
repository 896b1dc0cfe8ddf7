"""Infrastructure layer: persistence, HTTP routing and external adapters."""
