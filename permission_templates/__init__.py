"""Permission template engine.

Materializes permission templates onto resources and predicts the effect of an
organization's default template on a resource that does not exist yet.
"""

__version__ = "0.1.0"
