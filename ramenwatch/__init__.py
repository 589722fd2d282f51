"""RamenWatch: terminal dashboard for a Ramen DR hub and its managed clusters."""

__version__ = "0.1.0"
