"""Domain models: owners and package versions. No HTTP, no CLI."""
