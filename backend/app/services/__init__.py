"""Services — client-side workflows built on top of the public API."""
