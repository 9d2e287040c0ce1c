"""graphanon: labelled graph anonymization against neighbourhood attribute disclosure."""

__version__ = "0.1.0"
