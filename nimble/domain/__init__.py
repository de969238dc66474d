"""Domain layer: contracts, enums and protocols with no framework wiring."""
