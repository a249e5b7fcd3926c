"""App state demo: one shared counter model, many subscribed displays."""
