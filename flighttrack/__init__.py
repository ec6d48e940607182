"""Poll for aircraft overhead, send them as fixed-size packets and render them as scrolling matrix banners."""

__version__ = "0.1.0"