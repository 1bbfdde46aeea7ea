"""Infrastructure layer: transport, decoding, configuration and wiring."""
