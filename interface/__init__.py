"""Transport layers around the engine: REST API and command line."""
