"""Infrastructure layer: outbound adapters implementing domain ports."""
