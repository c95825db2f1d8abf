"""taskdesk: console task manager seeded from a demo REST API, mirrored to a local JSON snapshot."""

__version__ = "0.1.0"
